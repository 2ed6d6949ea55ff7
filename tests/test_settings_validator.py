from __future__ import annotations

import pytest

from amnezic.core.errors import ErrorKind, GameError
from amnezic.core.models import GameSettings, Source, parse_sources
from amnezic.core.settings import validate_settings


def _settings(**overrides) -> GameSettings:
    values = {
        "seed": 1,
        "question_count": 10,
        "answer_count": 4,
        "player_count": 2,
        "sources": (Source.LEGACY,),
    }
    values.update(overrides)
    return GameSettings(**values)


@pytest.mark.parametrize("players", [2, 99])
@pytest.mark.parametrize("questions", [1, 999])
@pytest.mark.parametrize("answers", [2, 99])
def test_bounds_are_inclusive(players: int, questions: int, answers: int) -> None:
    validate_settings(_settings(player_count=players, question_count=questions, answer_count=answers))


@pytest.mark.parametrize(
    "overrides, kind",
    [
        ({"player_count": 1}, ErrorKind.INVALID_PLAYER_COUNT),
        ({"player_count": 100}, ErrorKind.INVALID_PLAYER_COUNT),
        ({"question_count": 0}, ErrorKind.INVALID_QUESTION_COUNT),
        ({"question_count": 1000}, ErrorKind.INVALID_QUESTION_COUNT),
        ({"answer_count": 1}, ErrorKind.INVALID_ANSWER_COUNT),
        ({"answer_count": 100}, ErrorKind.INVALID_ANSWER_COUNT),
        ({"sources": ()}, ErrorKind.MISSING_SOURCE),
    ],
)
def test_out_of_bounds_reports_kind(overrides: dict[str, object], kind: ErrorKind) -> None:
    with pytest.raises(GameError) as info:
        validate_settings(_settings(**overrides))
    assert info.value.kind is kind


def test_first_failing_check_wins() -> None:
    with pytest.raises(GameError) as info:
        validate_settings(_settings(player_count=0, question_count=0, answer_count=0, sources=()))
    assert info.value.kind is ErrorKind.INVALID_PLAYER_COUNT


def test_parse_sources_drops_unknown_and_duplicates() -> None:
    assert parse_sources([" Legacy", "deezer", "", "GENRE", "legacy"]) == (Source.LEGACY, Source.GENRE)
    assert parse_sources(None) == ()
    assert Source.parse("bogus") is None
