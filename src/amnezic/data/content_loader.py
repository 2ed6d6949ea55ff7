from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ..core.errors import ContentError
from ..core.models import ContentEntry, Genre, Source

__all__ = [
    "DATASET_ORDER",
    "ContentLoaderConfig",
    "ContentRegistry",
    "get_registry",
]

logger = logging.getLogger(__name__)

# Load order fixes every derived genre/entry id; appending is safe, reordering
# or inserting breaks ids already handed out in persisted games.
DATASET_ORDER: tuple[Source, ...] = (Source.LEGACY, Source.DECADE, Source.GENRE)

SOURCE_UNIT = 1_000_000
GENRE_UNIT = 1_000

_DATASET_DIR = Path(__file__).with_name("datasets")


def _default_resources() -> dict[Source, Path]:
    return {source: _DATASET_DIR / f"{source.value}.json" for source in DATASET_ORDER}


@dataclass(slots=True)
class ContentLoaderConfig:
    """Where the fixed datasets live and how media urls are rooted."""

    resources: dict[Source, Path] = field(default_factory=_default_resources)
    media_root: str = ""


class ContentRegistry:
    """Fixed question pools, numbered from dataset load order.

    Built once and read-only afterwards, so one instance can be shared by
    concurrent generation calls.
    """

    def __init__(self, config: ContentLoaderConfig | None = None) -> None:
        self._config = config or ContentLoaderConfig()
        self._media_root = self._config.media_root.strip().rstrip("/")
        self._entry_ids: dict[Source, tuple[int, ...]] = {}
        self._entries: dict[int, ContentEntry] = {}
        self._genres: dict[int, Genre] = {}
        for index, source in enumerate(DATASET_ORDER):
            path = self._config.resources.get(source)
            if path is None:
                continue
            self._load_source(index, source, self._load_resource(path))

    @property
    def sources(self) -> tuple[Source, ...]:
        return tuple(self._entry_ids)

    @staticmethod
    def _load_resource(path: Path) -> dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            raise ContentError(f"Cannot load dataset {path.name}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("genres"), list):
            raise ContentError(f"Invalid dataset payload in {path.name}")
        return data

    def _load_source(self, index: int, source: Source, payload: dict[str, Any]) -> None:
        source_offset = SOURCE_UNIT * (index + 1)
        entry_ids: list[int] = []
        for genre_index, raw_genre in enumerate(payload["genres"]):
            if not isinstance(raw_genre, dict):
                raise ContentError(f"{source.value}: genre #{genre_index} is not an object")
            genre_id = source_offset + GENRE_UNIT * (genre_index + 1)
            media = raw_genre.get("media") or []
            if len(media) >= GENRE_UNIT:
                raise ContentError(f"{source.value}: genre #{genre_index} holds too many media")
            entries = tuple(
                self._to_entry(genre_id + media_index + 1, genre_id, raw_media)
                for media_index, raw_media in enumerate(media)
            )
            self._genres[genre_id] = Genre(
                genre_id=genre_id,
                title=str(raw_genre.get("genre") or ""),
                entries=entries,
            )
            for entry in entries:
                self._entries[entry.entry_id] = entry
                entry_ids.append(entry.entry_id)
        self._entry_ids[source] = tuple(entry_ids)
        logger.info(
            "Loaded content dataset",
            extra={"source": source.value, "genres": len(payload["genres"]), "entries": len(entry_ids)},
        )

    def _to_entry(self, entry_id: int, genre_id: int, raw: Any) -> ContentEntry:
        if not isinstance(raw, dict) or not raw.get("title"):
            raise ContentError(f"media {entry_id} has no title")
        artist = raw.get("artist") or {}
        return ContentEntry(
            entry_id=entry_id,
            genre_id=genre_id,
            title=str(raw["title"]),
            media_url=self._media_url(str(raw.get("music") or "")),
            artist_name=str(artist.get("name") or "") if isinstance(artist, dict) else "",
            music_id=entry_id,
        )

    def _media_url(self, file_name: str) -> str:
        if self._media_root and file_name:
            return f"{self._media_root}/{file_name}"
        return file_name

    def entry_ids_for(self, source: Source) -> tuple[int, ...]:
        return self._entry_ids.get(source, ())

    def entry(self, entry_id: int) -> ContentEntry:
        try:
            return self._entries[entry_id]
        except KeyError:
            raise KeyError(f"entry {entry_id} not found") from None

    def genre(self, genre_id: int) -> Genre:
        try:
            return self._genres[genre_id]
        except KeyError:
            raise KeyError(f"genre {genre_id} not found") from None


_REGISTRY: Optional[ContentRegistry] = None
_REGISTRY_ROOT: Optional[str] = None


def get_registry(media_root: str = "") -> ContentRegistry:
    """Return the shared registry over the bundled datasets."""

    global _REGISTRY, _REGISTRY_ROOT
    if _REGISTRY is None or _REGISTRY_ROOT != media_root:
        _REGISTRY = ContentRegistry(ContentLoaderConfig(media_root=media_root))
        _REGISTRY_ROOT = media_root
    return _REGISTRY
