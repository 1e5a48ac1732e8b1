"""
Unit tests for Cursor.
"""

from dicealgebra.dice.cursor import Cursor


class TestCursor:
    """Test peek/peek_next/next traversal."""

    def test_peek_at_end(self):
        """Test peek on an exhausted cursor."""
        assert Cursor([]).peek() is None

    def test_peek_returns_current(self):
        """Test peek returns the current element."""
        assert Cursor([1]).peek() == 1

    def test_peek_does_not_advance(self):
        """Test repeated peeks see the same element."""
        cursor = Cursor([1, 2])
        cursor.peek()
        assert cursor.peek() == 1
        assert cursor.position == 0

    def test_peek_next_without_next_element(self):
        """Test peek_next when only one element remains."""
        assert Cursor([1]).peek_next() is None

    def test_peek_next_returns_next(self):
        """Test peek_next looks one element ahead."""
        cursor = Cursor([1, 2])
        assert cursor.peek_next() == 2
        assert cursor.position == 0

    def test_next_at_end(self):
        """Test next on an exhausted cursor does not move."""
        cursor = Cursor([])
        assert cursor.next() is None
        assert cursor.position == 0

    def test_next_returns_current(self):
        """Test next returns the current element."""
        assert Cursor([1]).next() == 1

    def test_next_advances(self):
        """Test next moves the cursor forward."""
        cursor = Cursor([1, 2])
        cursor.next()
        assert cursor.peek() == 2
        assert cursor.peek_next() is None

    def test_full_traversal(self):
        """Test walking off the end of the sequence."""
        cursor = Cursor(['a', 'b'])
        assert cursor.next() == 'a'
        assert cursor.next() == 'b'
        assert cursor.next() is None
        assert cursor.next() is None
        assert cursor.position == 2
