"""Adapter over the user-authored theme catalog (the ``store`` source).

The catalog itself belongs to the CRUD layer; the engine only needs one read
of every theme tagged for the ``store`` source, which :class:`StorePool`
turns into the same ``Genre``/``ContentEntry`` shapes the fixed datasets use.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Protocol

from ..core.models import ContentEntry, Genre, Source

__all__ = [
    "STORE_OFFSET",
    "CatalogMusic",
    "CatalogQuestion",
    "CatalogTheme",
    "InMemoryThemeCatalog",
    "StorePool",
    "ThemeCatalog",
]

logger = logging.getLogger(__name__)

# Catalog ids are shifted above every fixed-dataset id.
STORE_OFFSET = 1_000_000_000


@dataclass(frozen=True)
class CatalogMusic:
    id: int
    name: str
    mp3_url: str = ""
    deezer_id: int = 0
    artist_name: str = ""
    album_name: str = ""


@dataclass(frozen=True)
class CatalogQuestion:
    id: int
    music: CatalogMusic
    text: str
    hint: str = ""


@dataclass(frozen=True)
class CatalogTheme:
    id: int
    title: str
    questions: tuple[CatalogQuestion, ...] = ()


class ThemeCatalog(Protocol):
    def list_by_source(self, source: Source) -> list[CatalogTheme]:
        ...


class InMemoryThemeCatalog:
    """Process-local catalog, used by the web app until a database is wired."""

    def __init__(self, themes: list[CatalogTheme] | None = None) -> None:
        self._themes: dict[int, CatalogTheme] = {}
        self._lock = threading.Lock()
        for theme in themes or ():
            self.put(theme)

    def put(self, theme: CatalogTheme) -> None:
        with self._lock:
            self._themes[theme.id] = theme

    def list_by_source(self, source: Source) -> list[CatalogTheme]:
        if source is not Source.STORE:
            return []
        with self._lock:
            return [self._themes[key] for key in sorted(self._themes)]


@dataclass
class StorePool:
    """Snapshot of one catalog read, shaped like the fixed registry."""

    entry_ids: tuple[int, ...] = ()
    entries: dict[int, ContentEntry] = field(default_factory=dict)
    genres: dict[int, Genre] = field(default_factory=dict)

    @classmethod
    def read(cls, catalog: ThemeCatalog) -> StorePool:
        pool = cls()
        ids: list[int] = []
        for theme in catalog.list_by_source(Source.STORE):
            genre_id = STORE_OFFSET + theme.id
            entries = tuple(_to_entry(genre_id, question) for question in theme.questions)
            pool.genres[genre_id] = Genre(genre_id=genre_id, title=theme.title, entries=entries)
            for entry in entries:
                pool.entries[entry.entry_id] = entry
                ids.append(entry.entry_id)
        pool.entry_ids = tuple(ids)
        logger.debug("Read store catalog", extra={"themes": len(pool.genres), "entries": len(ids)})
        return pool

    def entry(self, entry_id: int) -> ContentEntry:
        return self.entries[entry_id]

    def genre(self, genre_id: int) -> Genre:
        return self.genres[genre_id]


def _to_entry(genre_id: int, question: CatalogQuestion) -> ContentEntry:
    music = question.music
    return ContentEntry(
        entry_id=STORE_OFFSET + question.id,
        genre_id=genre_id,
        title=music.name,
        media_url=music.mp3_url,
        artist_name=music.artist_name,
        album_name=music.album_name,
        text=question.text,
        hint=question.hint,
        music_id=music.id,
        deezer_id=music.deezer_id,
    )
