"""Hierarchical game identifiers.

Every identifier below the game level is the parent identifier plus an
ordinal scaled by a fixed decimal unit, so the parent of any id can be
recovered by integer division alone::

    game           42 0000000   new_game_id(42)
    question       42 017 0000  new_question_id(game_id, 17)
    answer         42 017 03 00 new_answer_id(question_id, 3)
    player answer  42 017 03 02 new_player_answer_id(answer_id, player_id=2)

Ordinals that do not fit their digit window would overlap the neighbouring
field, so the encoders reject them instead of producing a corrupted id.
"""

from __future__ import annotations

from typing import NewType

__all__ = [
    "ANSWER_UNIT",
    "GAME_UNIT",
    "PLAYER_UNIT",
    "QUESTION_UNIT",
    "GameAnswerId",
    "GameId",
    "GamePlayerAnswerId",
    "GamePlayerId",
    "GameQuestionId",
    "MAX_ANSWER_NUMBER",
    "MAX_PLAYER_NUMBER",
    "MAX_QUESTION_NUMBER",
    "new_answer_id",
    "new_game_id",
    "new_player_answer_id",
    "new_player_id",
    "new_question_id",
    "split_answer_id",
    "split_player_answer_id",
    "split_question_id",
]

GAME_UNIT = 10_000_000
QUESTION_UNIT = 10_000
ANSWER_UNIT = 100
PLAYER_UNIT = 1

MAX_QUESTION_NUMBER = GAME_UNIT // QUESTION_UNIT - 1
MAX_ANSWER_NUMBER = QUESTION_UNIT // ANSWER_UNIT - 1
MAX_PLAYER_NUMBER = ANSWER_UNIT // PLAYER_UNIT - 1

GameId = NewType("GameId", int)
GameQuestionId = NewType("GameQuestionId", int)
GameAnswerId = NewType("GameAnswerId", int)
GamePlayerId = NewType("GamePlayerId", int)
GamePlayerAnswerId = NewType("GamePlayerAnswerId", int)


def _check_number(level: str, number: int, upper: int | None) -> None:
    if number < 1 or (upper is not None and number > upper):
        window = f"1..{upper}" if upper is not None else ">= 1"
        raise ValueError(f"{level} number {number} outside {window}")


def new_game_id(number: int) -> GameId:
    _check_number("game", number, None)
    return GameId(number * GAME_UNIT)


def new_question_id(game_id: GameId, number: int) -> GameQuestionId:
    _check_number("question", number, MAX_QUESTION_NUMBER)
    return GameQuestionId(game_id + number * QUESTION_UNIT)


def new_answer_id(question_id: GameQuestionId, number: int) -> GameAnswerId:
    _check_number("answer", number, MAX_ANSWER_NUMBER)
    return GameAnswerId(question_id + number * ANSWER_UNIT)


def new_player_id(number: int) -> GamePlayerId:
    _check_number("player", number, MAX_PLAYER_NUMBER)
    return GamePlayerId(number * PLAYER_UNIT)


def new_player_answer_id(answer_id: GameAnswerId, player_id: GamePlayerId) -> GamePlayerAnswerId:
    _check_number("player", player_id, MAX_PLAYER_NUMBER)
    return GamePlayerAnswerId(answer_id + player_id)


def split_question_id(question_id: int) -> GameId:
    return GameId((question_id // GAME_UNIT) * GAME_UNIT)


def split_answer_id(answer_id: int) -> tuple[GameId, GameQuestionId]:
    game_id = GameId((answer_id // GAME_UNIT) * GAME_UNIT)
    question_id = GameQuestionId((answer_id // QUESTION_UNIT) * QUESTION_UNIT)
    return game_id, question_id


def split_player_answer_id(
    player_answer_id: int,
) -> tuple[GameId, GameQuestionId, GameAnswerId, GamePlayerId]:
    game_id = GameId((player_answer_id // GAME_UNIT) * GAME_UNIT)
    question_id = GameQuestionId((player_answer_id // QUESTION_UNIT) * QUESTION_UNIT)
    answer_id = GameAnswerId((player_answer_id // ANSWER_UNIT) * ANSWER_UNIT)
    player_id = GamePlayerId(player_answer_id % ANSWER_UNIT)
    return game_id, question_id, answer_id, player_id
