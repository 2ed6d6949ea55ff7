from __future__ import annotations

from enum import Enum

__all__ = ["ContentError", "ErrorKind", "GameError"]


class ErrorKind(str, Enum):
    INVALID_PLAYER_COUNT = "invalid number of player"
    INVALID_QUESTION_COUNT = "invalid number of question"
    INVALID_ANSWER_COUNT = "invalid number of answer"
    MISSING_SOURCE = "missing source"
    INVALID_GAME_ID = "invalid game id"
    GAME_NOT_FOUND = "game not found"
    CONCURRENT_UPDATE = "concurrent update"
    CANCELLED = "cancelled"


class GameError(Exception):
    """Expected failure of a game operation, identified by its ``kind``."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


class ContentError(ValueError):
    """Raised when an embedded dataset cannot be loaded."""
