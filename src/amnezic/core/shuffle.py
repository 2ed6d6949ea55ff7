"""In-place shuffles driven by a caller-owned generator.

The default draw picks the swap partner from the whole list at every step.
That is not a uniform permutation, but games generated so far (and the
fixtures recorded from them) depend on it, so it stays the default.  The
``uniform`` variant is textbook Fisher-Yates.
"""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

__all__ = ["shuffle"]

T = TypeVar("T")


def shuffle(items: MutableSequence[T], rng: random.Random, *, uniform: bool = False) -> None:
    size = len(items)
    for i in range(size):
        j = rng.randrange(i, size) if uniform else rng.randrange(size)
        if j != i:
            items[i], items[j] = items[j], items[i]
