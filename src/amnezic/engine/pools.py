from __future__ import annotations

from typing import Protocol

from ..core.models import ContentEntry, Genre, Source
from ..data.catalog import STORE_OFFSET, StorePool, ThemeCatalog
from ..data.content_loader import ContentRegistry

__all__ = ["ContentPool", "PoolView"]


class ContentPool(Protocol):
    def entry_ids_for(self, source: Source) -> tuple[int, ...]:
        ...

    def entry(self, entry_id: int) -> ContentEntry:
        ...

    def genre(self, genre_id: int) -> Genre:
        ...


class PoolView:
    """Per-call view joining the fixed registry with one store read.

    The catalog is read at most once, and only when the ``store`` source is
    requested, so every lookup within a call sees the same snapshot.
    """

    def __init__(self, registry: ContentRegistry, catalog: ThemeCatalog | None = None) -> None:
        self._registry = registry
        self._catalog = catalog
        self._store: StorePool | None = None

    def _store_pool(self) -> StorePool:
        if self._store is None:
            self._store = StorePool.read(self._catalog) if self._catalog is not None else StorePool()
        return self._store

    def entry_ids_for(self, source: Source) -> tuple[int, ...]:
        if source is Source.STORE:
            return self._store_pool().entry_ids
        return self._registry.entry_ids_for(source)

    def entry(self, entry_id: int) -> ContentEntry:
        if entry_id >= STORE_OFFSET:
            return self._store_pool().entry(entry_id)
        return self._registry.entry(entry_id)

    def genre(self, genre_id: int) -> Genre:
        if genre_id >= STORE_OFFSET:
            return self._store_pool().genre(genre_id)
        return self._registry.genre(genre_id)
