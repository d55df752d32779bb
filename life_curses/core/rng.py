"""Random source used to seed boards."""
import logging
import time
from typing import Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class RandomSource:
    """
    Uniform integer source backed by a numpy Generator.

    The generator is seeded exactly once, at construction. Without an
    explicit seed the current time in nanoseconds is used.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns()
        self.seed = int(seed)
        self._rng = np.random.default_rng(self.seed)
        logger.debug("Random source seeded with %d", self.seed)

    def rand(self, n: int) -> int:
        """Return an integer uniformly distributed in [0, n)."""
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return int(self._rng.integers(0, n))

    def rand_array(self, n: int, shape: Tuple[int, ...]) -> np.ndarray:
        """Return an array of independent draws in [0, n)."""
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._rng.integers(0, n, size=shape)
