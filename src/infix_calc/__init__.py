"""
infix-calc - Infix Arithmetic Expression Evaluator

Evaluates expressions such as ``(1 + 2) * 3 ^ 2`` in three stages: a lexer
producing classified tokens, a shunting-yard pass reordering them into
postfix (Reverse Polish) notation, and a stack-based postfix evaluator.
"""

__version__ = "1.0.0"
__author__ = "infix-calc Team"

from infix_calc.errors import (
    CalculatorError,
    DivisionByZeroError,
    EvaluationError,
    MalformedExpressionError,
    NumberParseError,
    StackUnderflowError,
    UnbalancedParenthesesError,
    UnexpectedSymbolError,
    UnknownOperatorError,
    UnresolvedIdentifierError,
)
from infix_calc.evaluator import evaluate
from infix_calc.lexer import tokenize
from infix_calc.models import Associativity, EvaluationOutcome, EvaluationResult, Token, TokenKind
from infix_calc.pipeline import analyze, evaluate_batch, evaluate_expression
from infix_calc.reorder import to_postfix

__all__ = [
    "Associativity",
    "CalculatorError",
    "DivisionByZeroError",
    "EvaluationError",
    "EvaluationOutcome",
    "EvaluationResult",
    "MalformedExpressionError",
    "NumberParseError",
    "StackUnderflowError",
    "Token",
    "TokenKind",
    "UnbalancedParenthesesError",
    "UnexpectedSymbolError",
    "UnknownOperatorError",
    "UnresolvedIdentifierError",
    "analyze",
    "evaluate",
    "evaluate_batch",
    "evaluate_expression",
    "to_postfix",
    "tokenize",
]
