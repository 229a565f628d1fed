"""
Postfix evaluator.

Reduces an RPN token sequence to one float with a value stack. Operands are
popped right-hand side first, so ``a b -`` computes ``a - b``.
"""

import math
import operator
from typing import Callable, Sequence

import structlog

from infix_calc.config import settings
from infix_calc.errors import (
    DivisionByZeroError,
    MalformedExpressionError,
    NumberParseError,
    StackUnderflowError,
    UnknownOperatorError,
    UnresolvedIdentifierError,
)
from infix_calc.models import Token, TokenKind

logger = structlog.get_logger()


def _divide(lhs: float, rhs: float) -> float:
    """
    Divide, raising DivisionByZeroError for a zero divisor.

    Unlike _power, which returns the IEEE value for 0 to a negative power,
    division by zero is reported as an error rather than inf or NaN.
    """
    if rhs == 0:
        raise DivisionByZeroError(f"Cannot divide {lhs!r} by zero")
    return lhs / rhs


def _power(lhs: float, rhs: float) -> float:
    """Real power with IEEE-754 pow results where math.pow raises."""
    try:
        return math.pow(lhs, rhs)
    except OverflowError:
        odd_exponent = rhs.is_integer() and rhs % 2 == 1
        return math.copysign(math.inf, lhs) if odd_exponent else math.inf
    except ValueError:
        # math domain error: 0 to a negative power, or negative base with a
        # fractional exponent
        if lhs == 0:
            odd_exponent = rhs.is_integer() and rhs % 2 == 1
            return math.copysign(math.inf, lhs) if odd_exponent else math.inf
        return math.nan


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}


def _parse_number(token: Token) -> float:
    try:
        return float(token.text)
    except ValueError as e:
        raise NumberParseError(token.text, e) from e


def evaluate(postfix: Sequence[Token], *, strict: bool | None = None) -> float:
    """
    Evaluate a postfix token sequence.

    In strict mode (default from ``settings.strict``) the sequence must reduce
    to exactly one value, and identifiers or stray parentheses are errors.
    Lenient mode skips such tokens and returns the bottom stack value.
    An empty sequence is always a MalformedExpressionError.
    """
    if strict is None:
        strict = settings.strict

    stack: list[float] = []

    for token in postfix:
        if token.kind == TokenKind.NUMBER:
            stack.append(_parse_number(token))
        elif token.kind == TokenKind.OPERATOR:
            # Operand count is checked before the operator is looked up
            if len(stack) < 2:
                raise StackUnderflowError(token.text, token.position)
            rhs = stack.pop()
            lhs = stack.pop()
            operation = _OPERATIONS.get(token.text)
            if operation is None:
                raise UnknownOperatorError(token.text)
            stack.append(operation(lhs, rhs))
        elif not strict:
            continue
        elif token.kind == TokenKind.IDENTIFIER:
            raise UnresolvedIdentifierError(token.text, token.position)
        else:
            raise MalformedExpressionError(
                f"stray {token.text!r} at position {token.position}"
            )

    if not stack:
        raise MalformedExpressionError("no value to return")
    if strict and len(stack) > 1:
        raise MalformedExpressionError(
            f"{len(stack)} values left after evaluation, expected 1"
        )

    logger.debug("Evaluated postfix", value=stack[0], leftover=len(stack) - 1)
    return stack[0]
