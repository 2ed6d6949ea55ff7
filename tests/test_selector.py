from __future__ import annotations

import random

from amnezic.core.models import Source
from amnezic.data.catalog import CatalogMusic, CatalogQuestion, CatalogTheme, InMemoryThemeCatalog
from amnezic.data.content_loader import get_registry
from amnezic.engine.pools import PoolView
from amnezic.engine.selector import candidate_ids, select_entry_ids


def test_candidates_follow_source_declaration_order() -> None:
    registry = get_registry()
    pool = PoolView(registry)

    ids = candidate_ids(pool, [Source.GENRE, Source.LEGACY])

    expected = list(registry.entry_ids_for(Source.LEGACY)) + list(registry.entry_ids_for(Source.GENRE))
    assert ids == expected


def test_selection_is_reproducible_for_a_seed() -> None:
    pool = PoolView(get_registry())
    sources = {Source.LEGACY, Source.DECADE}

    first = select_entry_ids(pool, sources, 8, random.Random(1234))
    second = select_entry_ids(pool, sources, 8, random.Random(1234))

    assert first == second
    assert len(first) == 8
    assert len(set(first)) == 8


def test_short_pool_returns_everything() -> None:
    registry = get_registry()
    pool = PoolView(registry)

    selected = select_entry_ids(pool, {Source.LEGACY}, 999, random.Random(5))

    assert sorted(selected) == sorted(registry.entry_ids_for(Source.LEGACY))


def test_store_source_reads_catalog_once() -> None:
    class CountingCatalog(InMemoryThemeCatalog):
        reads = 0

        def list_by_source(self, source):
            CountingCatalog.reads += 1
            return super().list_by_source(source)

    music = CatalogMusic(id=7, name="Song")
    catalog = CountingCatalog([CatalogTheme(id=1, title="Mine", questions=(CatalogQuestion(id=3, music=music, text="A"),))])
    pool = PoolView(get_registry(), catalog)

    selected = select_entry_ids(pool, {Source.STORE}, 5, random.Random(0))
    pool.entry(selected[0])
    pool.genre(pool.entry(selected[0]).genre_id)

    assert selected == [1_000_000_003]
    assert CountingCatalog.reads == 1
