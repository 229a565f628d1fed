"""
Lexer: turns an expression string into classified tokens.

One left-to-right pass with no backtracking. Numbers are not validated here;
"1.2.3" becomes a single number token and fails when it is parsed.
"""

import structlog

from infix_calc.errors import UnexpectedSymbolError
from infix_calc.models import OPERATORS, Token, TokenKind

logger = structlog.get_logger()


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def tokenize(expression: str) -> list[Token]:
    """
    Split ``expression`` into tokens in order of appearance.

    Raises UnexpectedSymbolError on the first character that cannot start a
    token. Whitespace is skipped.
    """
    tokens: list[Token] = []
    length = len(expression)
    i = 0

    while i < length:
        char = expression[i]
        start = i
        i += 1

        if _is_ascii_digit(char):
            while i < length and (_is_ascii_digit(expression[i]) or expression[i] == "."):
                i += 1
            kind = TokenKind.NUMBER
        elif _is_ascii_letter(char):
            while i < length and expression[i].isalnum():
                i += 1
            kind = TokenKind.IDENTIFIER
        elif char in OPERATORS:
            kind = TokenKind.OPERATOR
        elif char == "(":
            kind = TokenKind.LEFT_PAREN
        elif char == ")":
            kind = TokenKind.RIGHT_PAREN
        elif char.isspace():
            continue
        else:
            raise UnexpectedSymbolError(char, start)

        tokens.append(Token(text=expression[start:i], kind=kind, position=start))

    logger.debug("Tokenized expression", tokens=len(tokens))
    return tokens
