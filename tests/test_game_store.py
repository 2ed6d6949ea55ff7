from __future__ import annotations

import pytest

from amnezic.core.errors import ErrorKind, GameError
from amnezic.core.ids import new_game_id
from amnezic.core.models import Game, GameSettings, Source
from amnezic.features.game.store import GameMemoryStore


def _game() -> Game:
    return Game(settings=GameSettings(seed=1, question_count=1, answer_count=2, player_count=2, sources=(Source.LEGACY,)))


def test_create_assigns_sequential_ids_and_first_version() -> None:
    store = GameMemoryStore()
    first = store.create(_game())
    second = store.create(_game())
    assert (first.id, first.version) == (new_game_id(1), 1)
    assert (second.id, second.version) == (new_game_id(2), 1)


def test_retrieve_returns_a_copy() -> None:
    store = GameMemoryStore()
    created = store.create(_game())

    fetched = store.retrieve(created.id)
    fetched.version = 99

    assert store.retrieve(created.id).version == 1


def test_update_bumps_version_and_rejects_stale_writes() -> None:
    store = GameMemoryStore()
    created = store.create(_game())

    reader_a = store.retrieve(created.id)
    reader_b = store.retrieve(created.id)
    updated = store.update(reader_a)
    assert updated.version == 2

    with pytest.raises(GameError) as info:
        store.update(reader_b)
    assert info.value.kind is ErrorKind.CONCURRENT_UPDATE
    assert store.retrieve(created.id).version == 2


def test_missing_game_is_reported() -> None:
    store = GameMemoryStore()
    created = store.create(_game())
    store.delete(created.id)

    for call in (lambda: store.retrieve(created.id), lambda: store.delete(created.id), lambda: store.update(created)):
        with pytest.raises(GameError) as info:
            call()
        assert info.value.kind is ErrorKind.GAME_NOT_FOUND
