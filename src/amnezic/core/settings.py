from __future__ import annotations

from .errors import ErrorKind, GameError
from .models import GameSettings

__all__ = [
    "MAX_ANSWER_COUNT",
    "MAX_PLAYER_COUNT",
    "MAX_QUESTION_COUNT",
    "MIN_ANSWER_COUNT",
    "MIN_PLAYER_COUNT",
    "MIN_QUESTION_COUNT",
    "validate_settings",
]

MIN_PLAYER_COUNT = 2
MAX_PLAYER_COUNT = 99

MIN_QUESTION_COUNT = 1
MAX_QUESTION_COUNT = 999

MIN_ANSWER_COUNT = 2
MAX_ANSWER_COUNT = 99


def validate_settings(settings: GameSettings) -> None:
    """Raise :class:`GameError` for the first out-of-bounds parameter.

    Upper bounds match the digit windows of :mod:`amnezic.core.ids`. Pool
    sizes are not checked here; short pools yield short games.
    """

    if not MIN_PLAYER_COUNT <= settings.player_count <= MAX_PLAYER_COUNT:
        raise GameError(ErrorKind.INVALID_PLAYER_COUNT, str(settings.player_count))
    if not MIN_QUESTION_COUNT <= settings.question_count <= MAX_QUESTION_COUNT:
        raise GameError(ErrorKind.INVALID_QUESTION_COUNT, str(settings.question_count))
    if not MIN_ANSWER_COUNT <= settings.answer_count <= MAX_ANSWER_COUNT:
        raise GameError(ErrorKind.INVALID_ANSWER_COUNT, str(settings.answer_count))
    if not settings.sources:
        raise GameError(ErrorKind.MISSING_SOURCE)
