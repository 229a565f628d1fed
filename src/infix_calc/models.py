"""
Core data models for infix-calc.

Defines tokens as produced by the lexer and the result records handed back
to callers of the pipeline.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class TokenKind(str, Enum):
    """Classification assigned to every token by the lexer."""
    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Associativity(str, Enum):
    """Grouping direction for chains of equal-precedence operators."""
    LEFT = "left"
    RIGHT = "right"


OPERATORS = "+-*/^"

PRECEDENCE = {
    "^": 2,
    "*": 1,
    "/": 1,
}


# =============================================================================
# Token Models
# =============================================================================

class Token(BaseModel):
    """A classified slice of the input expression."""

    model_config = ConfigDict(frozen=True)

    text: str
    kind: TokenKind
    position: int = Field(0, ge=0, description="Offset of the first character")

    @property
    def precedence(self) -> int:
        """Binding strength; only meaningful for operators."""
        return PRECEDENCE.get(self.text, 0)

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Result Models
# =============================================================================

class EvaluationResult(BaseModel):
    """Trace of one successful evaluation: every stage's output."""
    expression: str
    tokens: list[Token]
    postfix: list[Token]
    value: float


class EvaluationOutcome(BaseModel):
    """
    Outcome of one expression in a batch.

    Exactly one of ``value`` and ``error`` is set.
    """
    expression: str
    value: float | None = None
    error: str | None = None
    error_type: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
