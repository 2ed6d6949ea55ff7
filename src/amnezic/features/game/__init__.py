"""Game feature: generation service, keyed store, schemas and API router."""

from .router import create_game_routers
from .schemas import GamePayload, GameResponse, game_payload
from .service import GameManager, PlayerUpdate
from .store import GameMemoryStore, GameStore

__all__ = [
    "GameManager",
    "GameMemoryStore",
    "GamePayload",
    "GameResponse",
    "GameStore",
    "PlayerUpdate",
    "create_game_routers",
    "game_payload",
]
