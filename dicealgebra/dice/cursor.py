"""
Forward-only, peekable traversal over a sequence.
"""

from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar('T')


class Cursor(Generic[T]):
    """
    Read-only cursor over a sequence with one element of lookahead past the
    current one.

    All three accessors return None once the requested position is past the
    end. Only next() moves the cursor, and only when it returns an element.
    """

    def __init__(self, items: Sequence[T]):
        self._items = items
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def peek(self) -> Optional[T]:
        """Element at the current position."""
        return self._at(self._position)

    def peek_next(self) -> Optional[T]:
        """Element one past the current position."""
        return self._at(self._position + 1)

    def next(self) -> Optional[T]:
        """Return the current element and advance past it."""
        item = self._at(self._position)
        if item is not None:
            self._position += 1
        return item

    def _at(self, index: int) -> Optional[T]:
        if index < len(self._items):
            return self._items[index]
        return None
