from typing import Optional

import numpy as np

from .errors import InvalidRangeError


class RandomSource:
    """
    Uniform integer sampling over half-open ranges, built on numpy's Generator.

    Pass a seed to get a reproducible sequence, or None for fresh OS entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def randrange(self, lo: int, hi: int, what: str = "value") -> int:
        """
        Return an integer sampled uniformly from [lo, hi).

        Args:
            lo: Inclusive lower bound.
            hi: Exclusive upper bound.
            what: Name of the sampled quantity, used in the error message.

        Raises:
            InvalidRangeError: If the range is empty (hi <= lo).
        """
        if hi <= lo:
            raise InvalidRangeError(lo, hi, what)
        return int(self._rng.integers(lo, hi))
