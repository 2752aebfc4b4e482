"""Random number helpers backed by an explicitly constructed numpy generator."""

from __future__ import annotations

import os
import random
from typing import Optional, Tuple

import numpy as np


def _ordered(low: float, high: float) -> Tuple[float, float]:
    if high < low:
        return high, low
    return low, high


class RandomNumberGenerator:
    """
    Draws random values between inclusive bounds.

    Each instance owns its numpy ``Generator``; pass one instance to the code
    that needs randomness instead of relying on process-wide state. Bounds
    given in the wrong order are swapped.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[np.random.Generator] = None,
    ) -> None:
        self._generator = generator if generator is not None else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def integer(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]``."""

        low, high = _ordered(low, high)
        return int(self._generator.integers(low, high, endpoint=True))

    def uniform(self, low: float, high: float) -> float:
        """Return a float between ``low`` and ``high``."""

        low, high = _ordered(low, high)
        if low == high:
            return float(low)
        return float(self._generator.uniform(low, high))

    def character(self, low: str, high: str) -> str:
        """Return a character whose code point lies in ``[low, high]``."""

        return chr(self.integer(ord(low), ord(high)))


def seed_everything(seed: int) -> None:
    """Seed python and numpy global state for reproducible scripts."""

    random.seed(seed)
    np.random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)


__all__ = ["RandomNumberGenerator", "seed_everything"]
