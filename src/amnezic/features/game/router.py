from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError, model_validator

from ...core.errors import ErrorKind, GameError
from ...core.ids import GameId
from ...core.models import GameSettings, Source, parse_sources
from .schemas import GameResponse
from .service import GameManager, PlayerUpdate

__all__ = ["CreateGameRequest", "UpdateGameRequest", "create_game_routers"]

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.GAME_NOT_FOUND: 404,
    ErrorKind.CONCURRENT_UPDATE: 409,
}


class CreateGameRequest(BaseModel):
    seed: int | None = None
    nb_question: int = 0
    nb_answer: int = 0
    nb_player: int = 0
    sources: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: dict[str, object]) -> dict[str, object]:
        if not isinstance(data, dict):
            return data
        cleaned: dict[str, object] = dict(data)
        for field in ("seed", "nb_question", "nb_answer", "nb_player"):
            value = cleaned.get(field)
            if value in (None, ""):
                cleaned.pop(field, None)
                continue
            if isinstance(value, str):
                try:
                    cleaned[field] = int(value.strip())
                except ValueError:
                    cleaned.pop(field, None)
        sources = cleaned.get("sources")
        if isinstance(sources, str):
            cleaned["sources"] = [item for item in sources.split(",") if item.strip()]
        elif sources is None:
            cleaned.pop("sources", None)
        return cleaned

    def to_settings(self) -> GameSettings:
        sources = parse_sources(self.sources)
        if not sources:
            logger.warning("No known source requested; falling back to legacy", extra={"requested": self.sources})
            sources = (Source.LEGACY,)
        seed = self.seed if self.seed is not None else time.time_ns() // 1_000_000
        return GameSettings(
            seed=seed,
            question_count=self.nb_question,
            answer_count=self.nb_answer,
            player_count=self.nb_player,
            sources=sources,
        )


class PlayerUpdateRequest(BaseModel):
    id: int
    name: str | None = None
    active: bool | None = None
    score: int | None = None


class UpdateGameRequest(BaseModel):
    version: int
    players: list[PlayerUpdateRequest] = Field(default_factory=list)


def _parse_game_id(raw: str) -> GameId:
    try:
        return GameId(int(raw.strip()))
    except ValueError:
        raise GameError(ErrorKind.INVALID_GAME_ID, raw) from None


def _http_error(exc: GameError) -> HTTPException:
    return HTTPException(_STATUS_BY_KIND.get(exc.kind, 400), str(exc))


_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _create_params(request: Request) -> dict[str, object]:
    """Collect create parameters from the query string, then the form or JSON body.

    Body values win over query values of the same name.
    """

    params: dict[str, object] = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        params.update({key: value for key, value in form.items() if isinstance(value, str)})
    elif await request.body():
        try:
            payload = await request.json()
        except ValueError as exc:
            raise HTTPException(422, "request body is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise HTTPException(422, "request body must be a JSON object")
        params.update(payload)
    return params


class _GameController:
    def __init__(self, manager: GameManager) -> None:
        self.manager = manager

    def _json_response(self, response: GameResponse) -> JSONResponse:
        return JSONResponse(response.to_dict())

    async def create(self, request: Request) -> JSONResponse:
        params = await _create_params(request)
        try:
            body = CreateGameRequest.model_validate(params)
        except ValidationError as exc:
            raise HTTPException(422, exc.errors(include_url=False, include_context=False)) from exc
        settings = body.to_settings()
        try:
            response = await self.manager.create_game_async(settings)
        except GameError as exc:
            raise _http_error(exc) from exc
        return self._json_response(response)

    async def retrieve(self, game_id: str) -> JSONResponse:
        try:
            response = await self.manager.retrieve_game_async(_parse_game_id(game_id))
        except GameError as exc:
            raise _http_error(exc) from exc
        return self._json_response(response)

    async def update(self, game_id: str, body: UpdateGameRequest) -> JSONResponse:
        updates = [PlayerUpdate(**player.model_dump()) for player in body.players]
        try:
            response = await self.manager.update_players_async(_parse_game_id(game_id), body.version, updates)
        except GameError as exc:
            raise _http_error(exc) from exc
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return self._json_response(response)

    async def delete(self, game_id: str) -> JSONResponse:
        try:
            response = await self.manager.delete_game_async(_parse_game_id(game_id))
        except GameError as exc:
            raise _http_error(exc) from exc
        return self._json_response(response)


def create_game_routers(manager: GameManager) -> tuple[APIRouter, APIRouter]:
    controller = _GameController(manager)

    router_v1 = APIRouter(prefix="/api/v1/game", tags=["game"])
    router_legacy = APIRouter(prefix="/api/game", tags=["game-legacy"])

    for router in (router_v1, router_legacy):
        router.add_api_route("/new", controller.create, methods=["PUT"])
        router.add_api_route("/{game_id}", controller.retrieve, methods=["GET"])
        router.add_api_route("/{game_id}", controller.update, methods=["POST"])
        router.add_api_route("/{game_id}", controller.delete, methods=["DELETE"])

    return router_v1, router_legacy
