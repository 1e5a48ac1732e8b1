"""
Exceptions raised while lexing, parsing and evaluating dice expressions.

Every DiceError is an expected, user-facing failure: its message is meant to
be shown as-is. NumericOverflowError is the odd one out and signals an
input the engine cannot represent rather than a mistake in the expression.
"""

from typing import Optional

from dicealgebra.core.result import ErrorCode


class DiceError(Exception):
    """Base class for user-facing dice expression errors."""

    message = "Invalid dice expression."
    error_code = ErrorCode.UNKNOWN

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class UnexpectedCharacterError(DiceError):
    """Raised when the input contains a character outside the dice alphabet."""

    error_code = ErrorCode.UNEXPECTED_CHARACTER

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Unexpected character in input: '{character}'")


class EmptyInputError(DiceError):
    """Raised when there is nothing to parse."""

    message = "Empty input."
    error_code = ErrorCode.EMPTY_INPUT


class UnbalancedParenthesisError(DiceError):
    """Raised when open and close parenthesis counts differ."""

    message = "Expression contains an unclosed parenthetical."
    error_code = ErrorCode.UNBALANCED_PARENTHESIS


class InvalidExpressionError(DiceError):
    """Raised when the token stream does not match the dice grammar."""

    message = "Input expression is not valid."
    error_code = ErrorCode.INVALID_EXPRESSION


class DivisionByZeroError(DiceError):
    """Raised when the right operand of a division evaluates to zero."""

    message = "Division by zero is not allowed."
    error_code = ErrorCode.DIVISION_BY_ZERO


class NumericOverflowError(OverflowError):
    """Raised when an integer literal does not fit in an unsigned 64-bit value."""

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Integer literal is too large: {literal}")


__all__ = [
    'DiceError',
    'UnexpectedCharacterError',
    'EmptyInputError',
    'UnbalancedParenthesisError',
    'InvalidExpressionError',
    'DivisionByZeroError',
    'NumericOverflowError',
]
