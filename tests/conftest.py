"""
Shared fixtures: deterministic stand-ins for the random source.
"""

import pytest

from dicealgebra.core import config as config_module
from dicealgebra.dice import random_source as random_source_module


class ScriptedSource:
    """Returns queued values in order, then falls back to the minimum."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def get(self, minimum, maximum):
        self.calls.append((minimum, maximum))
        if self.values:
            return self.values.pop(0)
        return minimum


@pytest.fixture
def ones():
    """Source that rolls 1 on every die."""
    return ScriptedSource()


@pytest.fixture
def scripted():
    """Factory for sources that roll the given values in order."""
    return ScriptedSource


@pytest.fixture
def fresh_globals(monkeypatch, tmp_path):
    """Reset the process-wide config and random source singletons."""
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.setattr(random_source_module, '_source', None)
    for name in ('DICE_LOG_LEVEL', 'DICE_LOG_COLORS', 'DICE_SEED', 'DICE_VERBOSE'):
        # setenv first so teardown restores the variable even if a test loads a .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep a stray .env in the working directory out of the tests
    monkeypatch.chdir(tmp_path)
    yield
