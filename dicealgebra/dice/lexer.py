"""
Lexer for dice algebra expressions.

Turns raw text such as "4d6h3 + (2 * d8)" into a flat list of tokens:
- digits become a single Integer token per run ("100" is one token)
- d/D, h/H, l/L become the dice markers D, H and L
- + - * / ( ) become operator and parenthesis tokens
- spaces, tabs and newlines are skipped

Any other character raises UnexpectedCharacterError.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from .errors import NumericOverflowError, UnexpectedCharacterError

logger = logging.getLogger(__name__)

# Integer literals are unsigned 64-bit values
MAX_INTEGER = 2 ** 64 - 1
MAX_INTEGER_DIGITS = len(str(MAX_INTEGER))

WHITESPACE = frozenset(' \t\n')


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    INTEGER = "integer"
    D = "d"
    H = "h"
    L = "l"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexed token. integer_value only matters for INTEGER tokens."""
    kind: TokenType
    integer_value: int = 0

    def __str__(self) -> str:
        if self.kind is TokenType.INTEGER:
            return str(self.integer_value)
        return str(self.kind)


# Single-character classification table (digits are handled separately)
CHARACTER_TOKENS: Dict[str, TokenType] = {
    'd': TokenType.D,
    'D': TokenType.D,
    'h': TokenType.H,
    'H': TokenType.H,
    'l': TokenType.L,
    'L': TokenType.L,
    '+': TokenType.ADD,
    '-': TokenType.SUBTRACT,
    '*': TokenType.MULTIPLY,
    '/': TokenType.DIVIDE,
    '(': TokenType.OPEN_PAREN,
    ')': TokenType.CLOSE_PAREN,
}


def _integer_token(digits: str) -> Token:
    # Compare lengths before int() so huge literals fail fast
    significant = digits.lstrip('0') or '0'
    if len(significant) > MAX_INTEGER_DIGITS or int(significant) > MAX_INTEGER:
        raise NumericOverflowError(digits)
    return Token(TokenType.INTEGER, int(significant))


def tokenize(text: str) -> List[Token]:
    """
    Convert a dice algebra expression into tokens.

    Examples:
        "2d6" → [Integer(2), D, Integer(6)]
        "d20 + 5" → [D, Integer(20), Add, Integer(5)]
        "  " → []

    Args:
        text: Expression text

    Returns:
        Tokens in source order

    Raises:
        UnexpectedCharacterError: If text contains a character outside the alphabet
        NumericOverflowError: If an integer literal exceeds MAX_INTEGER
    """
    tokens: List[Token] = []
    pending_digits = ''

    for char in text:
        if char in WHITESPACE:
            continue

        # str.isdigit() accepts non-ASCII digits, so compare explicitly
        if '0' <= char <= '9':
            pending_digits += char
            continue

        kind = CHARACTER_TOKENS.get(char)
        if kind is None:
            raise UnexpectedCharacterError(char)

        if pending_digits:
            tokens.append(_integer_token(pending_digits))
            pending_digits = ''

        tokens.append(Token(kind))

    if pending_digits:
        tokens.append(_integer_token(pending_digits))

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens


__all__ = ['TokenType', 'Token', 'tokenize', 'MAX_INTEGER']
