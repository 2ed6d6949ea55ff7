from __future__ import annotations

import argparse
import json
import sys
import time

from .config import AppConfig, configure_logging
from .core.errors import GameError
from .core.models import GameSettings, parse_sources
from .data.content_loader import get_registry
from .engine.generator import QuizGenerator
from .features.game import GameManager


def _add_generate_args(p: argparse.ArgumentParser) -> None:
    # If omitted, the current time in milliseconds is used. Pass an int to reproduce a game.
    p.add_argument("--seed", type=int, default=None, help="RNG seed (current time if omitted)")
    p.add_argument("--questions", type=int, default=10, help="Number of questions (1-999)")
    p.add_argument("--answers", type=int, default=4, help="Answers per question (2-99)")
    p.add_argument("--players", type=int, default=2, help="Number of players (2-99)")
    p.add_argument(
        "--sources",
        type=str,
        default="legacy",
        help="Comma-separated content sources: legacy, decade, genre",
    )
    p.add_argument("--media-root", type=str, default=None, help="URL prefix for media files")
    p.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact)")


def main(argv: list[str] | None = None) -> int:
    """Generate one game from the bundled datasets and print it as JSON."""

    config = AppConfig.from_env()
    parser = argparse.ArgumentParser(prog="amnezic", description="Music quiz game generator")
    _add_generate_args(parser)
    args = parser.parse_args(argv)
    configure_logging("WARNING" if config.log_level == "INFO" else config.log_level)

    sources = parse_sources(args.sources.split(","))
    settings = GameSettings(
        seed=args.seed if args.seed is not None else time.time_ns() // 1_000_000,
        question_count=args.questions,
        answer_count=args.answers,
        player_count=args.players,
        sources=sources,
    )
    media_root = args.media_root if args.media_root is not None else config.media_root
    manager = GameManager(QuizGenerator(get_registry(media_root)))
    try:
        response = manager.create_game(settings)
    except GameError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(response.to_dict(), indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
