"""Random number sources for generation.

There is no shared module-level generator: every generator and tunnel creator
receives its source explicitly. A fixed seed and fixed parameters reproduce
the same map.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Rng(Protocol):
    def next_int(self, low_or_upper: int, upper: Optional[int] = None) -> int: ...


class SeededRng:
    """Bounded integer draws over a private ``random.Random``.

    ``next_int(upper)`` draws from ``[0, upper)`` and ``next_int(low, upper)`` from
    ``[low, upper)``. An empty range (``low == upper``) yields ``low``.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self, low_or_upper: int, upper: Optional[int] = None) -> int:
        if upper is None:
            low, upper = 0, low_or_upper
        else:
            low = low_or_upper
        if upper < low:
            raise ValueError(f"empty range [{low}, {upper})")
        if upper == low:
            return low
        return self._random.randrange(low, upper)

    def __repr__(self) -> str:
        return f"SeededRng(seed={self.seed})"


def resolve_rng(rng: Optional[Rng], seed: Optional[int]) -> Optional[Rng]:
    """Injected source wins; otherwise build one from ``seed`` (None if neither given)."""
    if rng is not None:
        return rng
    if seed is not None:
        return SeededRng(seed)
    return None


__all__ = ["Rng", "SeededRng", "resolve_rng"]
