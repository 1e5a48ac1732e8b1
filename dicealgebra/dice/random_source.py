"""
Uniform integer source used by the dice evaluator.

The evaluator only ever calls get(min, max), so anything with that method
can stand in for RandomSource (tests use a fixed-value stub).
"""

import logging
import os
import random
import time
from typing import Optional

from dicealgebra.core.config import get_config

logger = logging.getLogger(__name__)


def entropy_seed() -> int:
    """Seed built from the wall clock and 16 bytes of OS entropy."""
    return time.time_ns() ^ int.from_bytes(os.urandom(16), 'big')


class RandomSource:
    """
    Seedable uniform integer generator.

    Not thread-safe: give each thread its own instance.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize source.

        Args:
            seed: Random seed for deterministic rolls (testing/replay).
                  When omitted a high-entropy seed is generated.
        """
        self.seed = seed
        self.rng = random.Random(entropy_seed() if seed is None else seed)

    def get(self, minimum: int, maximum: int) -> int:
        """Uniform integer in [minimum, maximum], both ends inclusive."""
        return self.rng.randint(minimum, maximum)

    def set_seed(self, seed: int):
        """Change random seed (for testing/replay)."""
        self.seed = seed
        self.rng = random.Random(seed)


# Process-wide source (lazy-loaded)
_source: Optional[RandomSource] = None


def get_random_source() -> RandomSource:
    """
    Get the process-wide random source, creating it on first use.

    Seeds from DICE_SEED (via the global config) when it is set, otherwise
    from entropy_seed().

    Returns:
        Global RandomSource instance
    """
    global _source
    if _source is None:
        seed = get_config().seed
        _source = RandomSource(seed)
        if seed is not None:
            logger.debug(f"Random source seeded from config: {seed}")
    return _source


__all__ = ['RandomSource', 'get_random_source', 'entropy_seed']
