from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .ids import GameAnswerId, GameId, GamePlayerId, GameQuestionId

__all__ = [
    "ContentEntry",
    "Game",
    "GameAlbum",
    "GameAnswer",
    "GameArtist",
    "GameMusic",
    "GamePlayer",
    "GameQuestion",
    "GameSettings",
    "GameTheme",
    "Genre",
    "Source",
    "parse_sources",
]


class Source(str, Enum):
    """Content origin a question may be drawn from.

    Declaration order is the order in which pools are concatenated by the
    selector, so it must not change.
    """

    LEGACY = "legacy"
    DECADE = "decade"
    GENRE = "genre"
    STORE = "store"

    @classmethod
    def parse(cls, value: str | None) -> Source | None:
        key = (value or "").strip().lower()
        for source in cls:
            if source.value == key:
                return source
        return None


def parse_sources(values: list[str] | tuple[str, ...] | None) -> tuple[Source, ...]:
    """Map raw source names to tags, dropping unknown and duplicate values."""

    parsed: list[Source] = []
    for value in values or ():
        source = Source.parse(value)
        if source is not None and source not in parsed:
            parsed.append(source)
    return tuple(parsed)


@dataclass(frozen=True)
class GameSettings:
    seed: int
    question_count: int
    answer_count: int
    player_count: int
    sources: tuple[Source, ...] = ()


@dataclass(frozen=True)
class ContentEntry:
    """One trivia unit eligible to become a question."""

    entry_id: int
    genre_id: int
    title: str
    media_url: str = ""
    artist_name: str = ""
    album_name: str = ""
    # user-authored answer texts (store-backed entries only)
    text: str = ""
    hint: str = ""
    music_id: int = 0
    deezer_id: int = 0


@dataclass(frozen=True)
class Genre:
    genre_id: int
    title: str
    entries: tuple[ContentEntry, ...] = ()


@dataclass(frozen=True)
class GameTheme:
    id: int
    title: str


@dataclass(frozen=True)
class GameArtist:
    id: int = 0
    deezer_id: int = 0
    name: str = ""
    img_url: str = ""


@dataclass(frozen=True)
class GameAlbum:
    id: int = 0
    deezer_id: int = 0
    name: str = ""
    img_url: str = ""


@dataclass(frozen=True)
class GameMusic:
    id: int
    name: str
    mp3_url: str
    deezer_id: int = 0
    artist: GameArtist | None = None
    album: GameAlbum | None = None


@dataclass
class GameAnswer:
    text: str
    hint: str
    correct: bool
    id: GameAnswerId = GameAnswerId(0)


@dataclass
class GameQuestion:
    theme: GameTheme
    music: GameMusic
    answers: list[GameAnswer] = field(default_factory=list)
    id: GameQuestionId = GameQuestionId(0)


@dataclass
class GamePlayer:
    id: GamePlayerId
    name: str
    active: bool = True
    score: int = 0


@dataclass
class Game:
    settings: GameSettings
    players: list[GamePlayer] = field(default_factory=list)
    questions: list[GameQuestion] = field(default_factory=list)
    id: GameId = GameId(0)
    version: int = 0
