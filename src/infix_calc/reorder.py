"""
Shunting-yard reordering of infix tokens into postfix (RPN) order.

The input sequence is only read; a new list is returned. In strict mode every
parenthesis must have a partner. Lenient mode keeps the historical behavior:
an unmatched ')' is dropped and an unclosed '(' is emitted to the output,
where the lenient evaluator ignores it.
"""

from typing import Sequence

import structlog

from infix_calc.config import settings
from infix_calc.errors import UnbalancedParenthesesError
from infix_calc.models import Associativity, Token, TokenKind

logger = structlog.get_logger()


def _should_pop(top: Token, incoming: Token, power_associativity: Associativity) -> bool:
    """Whether the stacked operator binds before the incoming one."""
    if top.precedence > incoming.precedence:
        return True
    if top.precedence < incoming.precedence:
        return False
    right_assoc = incoming.text == "^" and power_associativity == Associativity.RIGHT
    return not right_assoc


def to_postfix(
    tokens: Sequence[Token],
    *,
    strict: bool | None = None,
    power_associativity: Associativity | str | None = None,
) -> list[Token]:
    """
    Reorder ``tokens`` from infix to postfix.

    Args:
        tokens: Lexer output.
        strict: Raise UnbalancedParenthesesError for mismatched parentheses.
            Defaults to ``settings.strict``.
        power_associativity: Grouping of chained ``^``. Defaults to
            ``settings.power_associativity``.
    """
    if strict is None:
        strict = settings.strict
    if power_associativity is None:
        power_associativity = settings.power_associativity
    power_associativity = Associativity(power_associativity)

    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind in (TokenKind.NUMBER, TokenKind.IDENTIFIER):
            output.append(token)
        elif token.kind == TokenKind.OPERATOR:
            while (
                stack
                and stack[-1].kind != TokenKind.LEFT_PAREN
                and _should_pop(stack[-1], token, power_associativity)
            ):
                output.append(stack.pop())
            stack.append(token)
        elif token.kind == TokenKind.LEFT_PAREN:
            stack.append(token)
        elif token.kind == TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind != TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()
            elif strict:
                raise UnbalancedParenthesesError(token.position, closing=True)

    while stack:
        token = stack.pop()
        if strict and token.kind == TokenKind.LEFT_PAREN:
            raise UnbalancedParenthesesError(token.position, closing=False)
        output.append(token)

    logger.debug("Reordered to postfix", postfix=" ".join(t.text for t in output))
    return output
