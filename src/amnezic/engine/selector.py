from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from ..core.models import Source
from ..core.shuffle import shuffle
from .pools import ContentPool

__all__ = ["candidate_ids", "select_entry_ids"]

logger = logging.getLogger(__name__)


def candidate_ids(pool: ContentPool, sources: Iterable[Source]) -> list[int]:
    """Concatenate the pools of ``sources`` in ``Source`` declaration order."""

    requested = set(sources)
    ids: list[int] = []
    for source in Source:
        if source in requested:
            ids.extend(pool.entry_ids_for(source))
    return ids


def select_entry_ids(
    pool: ContentPool,
    sources: Iterable[Source],
    count: int,
    rng: random.Random,
    *,
    uniform: bool = False,
) -> list[int]:
    """Pick up to ``count`` entry ids in a seed-determined order.

    ``rng`` must belong to the calling generation only; the answer builder
    continues drawing from it after selection.  A pool smaller than ``count``
    yields a shorter list rather than an error.
    """

    ids = candidate_ids(pool, sources)
    shuffle(ids, rng, uniform=uniform)
    selected = ids[: max(0, count)]
    if len(selected) < count:
        logger.info("Content pool smaller than requested", extra={"requested": count, "available": len(selected)})
    return selected
