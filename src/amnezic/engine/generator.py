"""Turns validated game settings into unnumbered game questions.

One ``random.Random`` is created per generation call from the settings seed
and passed explicitly to the selector and the answer builder, in that order.
Nothing else may draw from it, otherwise the same seed would stop producing
the same game.
"""

from __future__ import annotations

import logging
import random

from .. import config
from ..core.models import Game, GameQuestion, GameSettings
from ..core.settings import validate_settings
from ..data.catalog import ThemeCatalog
from ..data.content_loader import ContentRegistry
from .answers import build_answers
from .assembler import create_players, to_question
from .pools import ContentPool, PoolView
from .selector import select_entry_ids

__all__ = ["QuizGenerator", "generate_questions"]

logger = logging.getLogger(__name__)


def generate_questions(
    pool: ContentPool,
    settings: GameSettings,
    rng: random.Random,
    *,
    uniform: bool = False,
) -> list[GameQuestion]:
    entry_ids = select_entry_ids(pool, settings.sources, settings.question_count, rng, uniform=uniform)
    questions: list[GameQuestion] = []
    for entry_id in entry_ids:
        entry = pool.entry(entry_id)
        genre = pool.genre(entry.genre_id)
        answers = build_answers(entry, genre, settings.answer_count, rng, uniform=uniform)
        questions.append(to_question(entry, genre, answers))
    return questions


class QuizGenerator:
    """Builds games from the shared registry and an optional live catalog."""

    def __init__(self, registry: ContentRegistry, catalog: ThemeCatalog | None = None) -> None:
        self.registry = registry
        self.catalog = catalog

    def generate(self, settings: GameSettings, *, rng: random.Random | None = None) -> Game:
        """Validate ``settings`` and return a game whose ids are not yet assigned.

        ``rng`` replaces the seed-derived generator; tests use it to replay a
        recorded draw sequence.
        """

        validate_settings(settings)
        generator = rng if rng is not None else random.Random(settings.seed)
        pool = PoolView(self.registry, self.catalog)
        questions = generate_questions(pool, settings, generator, uniform=config.is_enabled(config.UNIFORM_SHUFFLE))
        logger.info(
            "Generated game questions",
            extra={
                "seed": settings.seed,
                "sources": [source.value for source in settings.sources],
                "requested": settings.question_count,
                "generated": len(questions),
            },
        )
        return Game(settings=settings, players=create_players(settings.player_count), questions=questions)
