"""
Recursive-descent parser for dice algebra.

Grammar, loosest binding first:

    Add       := Mult (('+' | '-') Mult)*
    Mult      := Atom (('*' | '/') Atom)*
    Atom      := '(' Add ')' | Roll
    Roll      := ShortRoll | LongRoll | Integer
    ShortRoll := D Integer
    LongRoll  := Integer D Integer [ H Integer | L Integer ]

Roll is picked by lookahead: a leading D is a ShortRoll, a D one token
ahead is a LongRoll, anything else must be an Integer. Both binary levels
are left-associative.
"""

import logging
from typing import List, Optional, Sequence

from .cursor import Cursor
from .errors import (
    DiceError,
    EmptyInputError,
    InvalidExpressionError,
    UnbalancedParenthesisError,
)
from .lexer import Token, TokenType, tokenize
from .tree import BinaryOpNode, IntegerNode, LongRollNode, Node, Operator, ShortRollNode

logger = logging.getLogger(__name__)

ADDITIVE_OPERATORS = {
    TokenType.ADD: Operator.ADD,
    TokenType.SUBTRACT: Operator.SUBTRACT,
}

MULTIPLICATIVE_OPERATORS = {
    TokenType.MULTIPLY: Operator.MULTIPLY,
    TokenType.DIVIDE: Operator.DIVIDE,
}


class Parser:
    """
    Single-use parser over one token sequence.

    Use the module-level parse() unless you need to hold on to the parser.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.cursor: Cursor[Token] = Cursor(tokens)

    def parse(self) -> Node:
        """
        Parse the whole token sequence into a tree.

        Returns:
            Root node

        Raises:
            EmptyInputError: If there are no tokens
            UnbalancedParenthesisError: If '(' and ')' counts differ
            InvalidExpressionError: If the tokens do not match the grammar
        """
        if not self.tokens:
            raise EmptyInputError()

        self._check_parenthesis_count()

        root = self._parse_add()

        # Everything must be consumed: "(1)2" is not an expression
        if self.cursor.peek() is not None:
            raise InvalidExpressionError()

        logger.debug(f"Parsed {len(self.tokens)} tokens")
        return root

    def _check_parenthesis_count(self):
        opened = sum(1 for token in self.tokens if token.kind is TokenType.OPEN_PAREN)
        closed = sum(1 for token in self.tokens if token.kind is TokenType.CLOSE_PAREN)
        if opened != closed:
            raise UnbalancedParenthesisError()

    def _parse_add(self) -> Node:
        left = self._parse_mult()
        while True:
            operator = self._match_operator(ADDITIVE_OPERATORS)
            if operator is None:
                return left
            left = BinaryOpNode(left, self._parse_mult(), operator)

    def _parse_mult(self) -> Node:
        left = self._parse_atom()
        while True:
            operator = self._match_operator(MULTIPLICATIVE_OPERATORS)
            if operator is None:
                return left
            left = BinaryOpNode(left, self._parse_atom(), operator)

    def _match_operator(self, operators) -> Optional[Operator]:
        """Consume and return the next operator if it is one of operators."""
        token = self.cursor.peek()
        if token is None or token.kind not in operators:
            return None
        self.cursor.next()
        return operators[token.kind]

    def _parse_atom(self) -> Node:
        token = self.cursor.peek()
        if token is None or token.kind is not TokenType.OPEN_PAREN:
            return self._parse_roll()

        self.cursor.next()
        inner = self._parse_add()
        self._expect(TokenType.CLOSE_PAREN)
        return inner

    def _parse_roll(self) -> Node:
        current = self.cursor.peek()
        if current is not None and current.kind is TokenType.D:
            return self._parse_short_roll()

        following = self.cursor.peek_next()
        if following is not None and following.kind is TokenType.D:
            return self._parse_long_roll()

        return IntegerNode(self._expect_integer())

    def _parse_short_roll(self) -> ShortRollNode:
        self._expect(TokenType.D)
        return ShortRollNode(self._expect_integer())

    def _parse_long_roll(self) -> LongRollNode:
        die_count = self._expect_integer()
        self._expect(TokenType.D)
        faces = self._expect_integer()

        # Keep suffix is optional: only consume H/L when present
        suffix = self.cursor.peek()
        if suffix is not None and suffix.kind is TokenType.H:
            self.cursor.next()
            return LongRollNode(die_count, faces, keep_high=self._expect_integer())
        if suffix is not None and suffix.kind is TokenType.L:
            self.cursor.next()
            return LongRollNode(die_count, faces, keep_low=self._expect_integer())

        return LongRollNode(die_count, faces)

    def _expect(self, kind: TokenType) -> Token:
        token = self.cursor.next()
        if token is None or token.kind is not kind:
            raise InvalidExpressionError()
        return token

    def _expect_integer(self) -> int:
        return self._expect(TokenType.INTEGER).integer_value


def parse(tokens: List[Token]) -> Node:
    """
    Parse tokens into a dice algebra tree.

    Examples:
        parse(tokenize("2d6+1")) → BinaryOpNode(LongRollNode(2, 6), IntegerNode(1), Operator.ADD)
        parse(tokenize("d20")) → ShortRollNode(20)

    Args:
        tokens: Output of tokenize()

    Returns:
        Root node of the tree

    Raises:
        EmptyInputError: If tokens is empty
        UnbalancedParenthesisError: If '(' and ')' counts differ
        InvalidExpressionError: If tokens do not form a valid expression
    """
    return Parser(tokens).parse()


def validate(text: str) -> bool:
    """
    Check if an expression is valid without evaluating it.

    Args:
        text: Expression text

    Returns:
        True if valid, False otherwise
    """
    try:
        parse(tokenize(text))
        return True
    except DiceError:
        return False


__all__ = ['Parser', 'parse', 'validate']
