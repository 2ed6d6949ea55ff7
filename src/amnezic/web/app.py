from __future__ import annotations

from fastapi import FastAPI

from ..config import AppConfig, configure_logging
from ..data.catalog import InMemoryThemeCatalog, ThemeCatalog
from ..data.content_loader import get_registry
from ..engine.generator import QuizGenerator
from ..features.game import GameManager, create_game_routers


def create_app(config: AppConfig | None = None, catalog: ThemeCatalog | None = None) -> FastAPI:
    settings = config or AppConfig.from_env()
    generator = QuizGenerator(get_registry(settings.media_root), catalog or InMemoryThemeCatalog())
    manager = GameManager(generator)

    application = FastAPI(title="Amnezic")
    application.state.manager = manager

    @application.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    router_v1, router_legacy = create_game_routers(manager)
    application.include_router(router_v1)
    application.include_router(router_legacy)
    return application


app = create_app()


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    config = AppConfig.from_env()
    configure_logging(config.log_level)
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":  # pragma: no cover
    main()
