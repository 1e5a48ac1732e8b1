"""
Result object for error handling at the edges of dice-algebra.

The tokenize/parse/execute pipeline raises exceptions. Callers that would
rather branch on a value (the CLI, embedding applications) go through
DiceRoller.evaluate(), which reports failures as a Result instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """
    Standard error codes for Result objects.

    Provides machine-readable error classification for every user-facing
    dice error.
    """

    # Lexer errors
    UNEXPECTED_CHARACTER = "unexpected_character"

    # Parser errors
    EMPTY_INPUT = "empty_input"
    UNBALANCED_PARENTHESIS = "unbalanced_parenthesis"
    INVALID_EXPRESSION = "invalid_expression"

    # Evaluation errors
    DIVISION_BY_ZERO = "division_by_zero"

    # Generic errors
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        """Return the error code value."""
        return self.value


@dataclass
class Result:
    """
    Represents the result of an operation that can succeed or fail.

    Attributes:
        success: Whether the operation succeeded
        data: The result data if successful
        error: Error message if failed
        error_code: Machine-readable error code if failed

    Examples:
        >>> result = DiceRoller().evaluate("2d6+1")
        >>> if result.success:
        ...     print(result.data.total)

        >>> result = Result.fail("Empty input.", ErrorCode.EMPTY_INPUT)
        >>> if not result.success:
        ...     print(f"Error: {result.error}")
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @staticmethod
    def ok(data: Any = None) -> 'Result':
        """
        Create a successful result.

        Args:
            data: Optional data to return

        Returns:
            Result with success=True
        """
        return Result(success=True, data=data)

    @staticmethod
    def fail(error: str, code: Optional[str | ErrorCode] = None) -> 'Result':
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            code: Machine-readable error code (ErrorCode enum or string)

        Returns:
            Result with success=False
        """
        error_code_str = code.value if isinstance(code, ErrorCode) else code
        return Result(success=False, error=error, error_code=error_code_str)

    def __bool__(self) -> bool:
        """Allow using Result in boolean context: if result: ..."""
        return self.success
