from __future__ import annotations

import asyncio
import logging
import os
import random
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any

from ...core.errors import ErrorKind, GameError
from ...core.ids import GameId
from ...core.models import Game, GameSettings
from ...engine.assembler import assign_ids
from ...engine.generator import QuizGenerator
from .schemas import GameResponse, game_payload
from .store import GameMemoryStore, GameStore

__all__ = ["GameManager", "PlayerUpdate", "run_blocking"]

logger = logging.getLogger(__name__)

_MAX_WORKERS = max(1, min(32, os.cpu_count() or 1))
_EXECUTOR = ThreadPoolExecutor(max_workers=_MAX_WORKERS, thread_name_prefix="amnezic-game")


async def run_blocking(func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
    """Run a blocking manager call on the shared worker pool.

    Cancelling the awaiting request does not interrupt the worker. Callers
    that must not leave side effects behind pass it a ``threading.Event`` to
    check before committing.
    """

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_EXECUTOR, partial(func, *args, **kwargs))


@dataclass(frozen=True)
class PlayerUpdate:
    id: int
    name: str | None = None
    active: bool | None = None
    score: int | None = None


class GameManager:
    """Owns game lifecycle independent of the transport layer."""

    def __init__(self, generator: QuizGenerator, store: GameStore | None = None) -> None:
        self.generator = generator
        self.store: GameStore = store or GameMemoryStore()
        self._lock = threading.Lock()

    def create_game(
        self,
        settings: GameSettings,
        *,
        rng: random.Random | None = None,
        cancelled: threading.Event | None = None,
    ) -> GameResponse:
        """Generate and persist a game.

        Once ``cancelled`` is set the game is discarded before it reaches the
        store, so an abandoned request never consumes a game number.
        """

        game = self.generator.generate(settings, rng=rng)
        with self._lock:
            if cancelled is not None and cancelled.is_set():
                logger.info("Discarded cancelled game creation", extra={"seed": settings.seed})
                raise GameError(ErrorKind.CANCELLED, "game creation")
            game = assign_ids(self.store.create(game))
            response = GameResponse(game=game_payload(game))
        logger.info(
            "Created game",
            extra={"game_id": game.id, "questions": len(game.questions), "players": len(game.players)},
        )
        return response

    async def create_game_async(self, settings: GameSettings) -> GameResponse:
        cancelled = threading.Event()
        try:
            return await run_blocking(self.create_game, settings, cancelled=cancelled)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    def get_game(self, game_id: GameId) -> Game:
        with self._lock:
            return self.store.retrieve(game_id)

    def retrieve_game(self, game_id: GameId) -> GameResponse:
        return GameResponse(game=game_payload(self.get_game(game_id)))

    async def retrieve_game_async(self, game_id: GameId) -> GameResponse:
        return await run_blocking(self.retrieve_game, game_id)

    def update_players(self, game_id: GameId, version: int, updates: list[PlayerUpdate]) -> GameResponse:
        """Apply player changes on top of ``version``.

        The store rejects the write when another update landed since the
        caller read ``version``.
        """

        with self._lock:
            game = self.store.retrieve(game_id)
            game.version = version
            players = {player.id: player for player in game.players}
            for update in updates:
                player = players.get(update.id)
                if player is None:
                    raise ValueError(f"player {update.id} not in game {game_id}")
                if update.name is not None:
                    player.name = update.name
                if update.active is not None:
                    player.active = update.active
                if update.score is not None:
                    player.score = update.score
            updated = self.store.update(game)
        logger.info("Updated game", extra={"game_id": game_id, "version": updated.version})
        return GameResponse(game=game_payload(updated))

    async def update_players_async(self, game_id: GameId, version: int, updates: list[PlayerUpdate]) -> GameResponse:
        return await run_blocking(self.update_players, game_id, version, updates)

    def delete_game(self, game_id: GameId) -> GameResponse:
        with self._lock:
            self.store.delete(game_id)
        logger.info("Deleted game", extra={"game_id": game_id})
        return GameResponse()

    async def delete_game_async(self, game_id: GameId) -> GameResponse:
        return await run_blocking(self.delete_game, game_id)
