"""
Exception hierarchy for infix-calc.

Every failure of the evaluation pipeline is a CalculatorError, so callers
evaluating many expressions can catch one type and move on to the next input.
"""


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


# =============================================================================
# Lexing
# =============================================================================

class UnexpectedSymbolError(CalculatorError):
    """Raised when the input contains a character no token can start with."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Unexpected symbol {symbol!r} at position {position}")


# =============================================================================
# Reordering
# =============================================================================

class UnbalancedParenthesesError(CalculatorError):
    """Raised when a parenthesis has no matching partner."""

    def __init__(self, position: int, closing: bool):
        self.position = position
        self.closing = closing
        if closing:
            message = f"Unmatched ')' at position {position}"
        else:
            message = f"Unclosed '(' at position {position}"
        super().__init__(message)


# =============================================================================
# Evaluation
# =============================================================================

class EvaluationError(CalculatorError):
    """Base class for failures while reducing a postfix sequence."""
    pass


class NumberParseError(EvaluationError):
    """Raised when a number token is not a valid floating-point literal."""

    def __init__(self, text: str, cause: Exception):
        self.text = text
        self.cause = cause
        super().__init__(f"Error parsing number {text!r}: {cause}")


class StackUnderflowError(EvaluationError):
    """Raised when an operator finds fewer than two operands."""

    def __init__(self, operator: str, position: int):
        self.operator = operator
        self.position = position
        super().__init__(
            f"Operator {operator!r} at position {position} is missing an operand"
        )


class UnknownOperatorError(EvaluationError):
    """Raised for an operator token outside + - * / ^."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unknown operator {text!r}")


class DivisionByZeroError(EvaluationError):
    """Raised when attempting to divide by zero."""
    pass


class MalformedExpressionError(EvaluationError):
    """Raised when the postfix sequence does not reduce to exactly one value."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed expression: {reason}")


class UnresolvedIdentifierError(MalformedExpressionError):
    """Raised when an identifier reaches the evaluator; nothing binds names."""

    def __init__(self, name: str, position: int):
        self.name = name
        self.position = position
        super().__init__(f"unresolved identifier {name!r} at position {position}")
