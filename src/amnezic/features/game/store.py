from __future__ import annotations

import copy
import logging
import threading
from typing import Protocol

from ...core.errors import ErrorKind, GameError
from ...core.ids import GameId, new_game_id
from ...core.models import Game

__all__ = ["GameMemoryStore", "GameStore"]

logger = logging.getLogger(__name__)


class GameStore(Protocol):
    def create(self, game: Game) -> Game:
        ...

    def retrieve(self, game_id: GameId) -> Game:
        ...

    def update(self, game: Game) -> Game:
        ...

    def delete(self, game_id: GameId) -> None:
        ...


class GameMemoryStore:
    """Keyed game store with optimistic concurrency on ``Game.version``.

    ``create`` keeps the instance it is given, so ids assigned to it right
    after creation are stored too.  Reads hand out deep copies.
    """

    def __init__(self) -> None:
        self._games: dict[GameId, Game] = {}
        self._next_number = 0
        self._lock = threading.Lock()

    def create(self, game: Game) -> Game:
        with self._lock:
            self._next_number += 1
            game.id = new_game_id(self._next_number)
            game.version = 1
            self._games[game.id] = game
        logger.debug("Created game", extra={"game_id": game.id})
        return game

    def retrieve(self, game_id: GameId) -> Game:
        with self._lock:
            game = self._require(game_id)
            return copy.deepcopy(game)

    def update(self, game: Game) -> Game:
        with self._lock:
            stored = self._require(game.id)
            if stored.version != game.version:
                raise GameError(
                    ErrorKind.CONCURRENT_UPDATE,
                    f"game {game.id} is at version {stored.version}, got {game.version}",
                )
            updated = copy.deepcopy(game)
            updated.version += 1
            self._games[game.id] = updated
            return copy.deepcopy(updated)

    def delete(self, game_id: GameId) -> None:
        with self._lock:
            self._require(game_id)
            del self._games[game_id]

    def _require(self, game_id: GameId) -> Game:
        game = self._games.get(game_id)
        if game is None:
            raise GameError(ErrorKind.GAME_NOT_FOUND, str(game_id))
        return game
