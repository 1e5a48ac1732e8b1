"""
Unit tests for RandomSource.
"""

from dicealgebra.dice import random_source
from dicealgebra.dice.random_source import RandomSource, get_random_source


class TestRandomSource:
    """Test the uniform integer source."""

    def test_range_is_inclusive(self):
        """Test values stay within [min, max] and reach both ends."""
        source = RandomSource(seed=42)
        values = {source.get(1, 4) for _ in range(500)}
        assert values == {1, 2, 3, 4}

    def test_single_value_range(self):
        """Test a range of one value."""
        source = RandomSource(seed=1)
        assert all(source.get(1, 1) == 1 for _ in range(10))

    def test_seed_is_deterministic(self):
        """Test that equal seeds produce equal sequences."""
        first = RandomSource(seed=7)
        second = RandomSource(seed=7)
        assert [first.get(1, 20) for _ in range(20)] == [second.get(1, 20) for _ in range(20)]

    def test_set_seed_restarts_sequence(self):
        """Test reseeding replays the sequence."""
        source = RandomSource(seed=3)
        expected = [source.get(1, 100) for _ in range(10)]

        source.set_seed(3)
        assert [source.get(1, 100) for _ in range(10)] == expected
        assert source.seed == 3

    def test_unseeded_sources_differ(self):
        """Test that entropy seeding gives independent sources."""
        first = RandomSource()
        second = RandomSource()
        assert [first.get(1, 10**9) for _ in range(5)] != [second.get(1, 10**9) for _ in range(5)]
        assert first.seed is None


class TestGetRandomSource:
    """Test the process-wide source."""

    def test_singleton(self, fresh_globals):
        """Test the same instance is returned every time."""
        assert get_random_source() is get_random_source()

    def test_seeded_from_config(self, fresh_globals, monkeypatch):
        """Test DICE_SEED makes the global source reproducible."""
        monkeypatch.setenv('DICE_SEED', '1234')
        source = get_random_source()

        assert source.seed == 1234
        expected = RandomSource(seed=1234)
        assert [source.get(1, 6) for _ in range(10)] == [expected.get(1, 6) for _ in range(10)]

    def test_lazy_creation(self, fresh_globals):
        """Test nothing is created until first use."""
        assert random_source._source is None
        get_random_source()
        assert random_source._source is not None
