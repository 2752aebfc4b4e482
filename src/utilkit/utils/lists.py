"""List helpers."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set, TypeVar

from .randomness import RandomNumberGenerator

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def unique_sample(
    pool: Sequence[T],
    n: int,
    rng: Optional[RandomNumberGenerator] = None,
) -> List[T]:
    """
    Pick ``n`` elements of ``pool`` at distinct random positions.

    Elements are returned in the order they were drawn. When the pool holds
    fewer than ``n`` elements the whole pool is returned unchanged.
    """

    items = list(pool)
    if len(items) < n:
        LOGGER.warning(
            "Pool of %d elements is too small for a sample of %d; returning the pool.",
            len(items),
            n,
        )
        return items

    rng = rng or RandomNumberGenerator()
    taken: Set[int] = set()
    result: List[T] = []
    while len(result) < n:
        index = rng.integer(0, len(items) - 1)
        if index in taken:
            continue
        taken.add(index)
        result.append(items[index])
    return result


__all__ = ["unique_sample"]
