"""Runtime configuration read from the environment.

Settings that change per deployment (bind address, media root, log level)
live in :class:`AppConfig`.  Behavioural switches that we want to flip
without a release are feature flags: ``AMNEZIC_FEATURES`` holds a
comma-separated, case-insensitive list of enabled flag names, and tests can
stack temporary overrides::

    from amnezic import config

    with config.override(config.UNIFORM_SHUFFLE):
        ...
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final

__all__ = [
    "AppConfig",
    "UNIFORM_SHUFFLE",
    "configure_logging",
    "is_enabled",
    "override",
]

_FEATURES_VAR: Final = "AMNEZIC_FEATURES"

# Shuffle with the shrinking-range Fisher-Yates draw instead of the
# full-range draw that existing fixtures were generated with.
UNIFORM_SHUFFLE: Final = "shuffle.uniform"


@dataclass(frozen=True)
class AppConfig:
    """Deployment settings for the web service and the CLI."""

    host: str = "0.0.0.0"
    port: int = 8000
    media_root: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT", "8000")
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from exc
        return cls(
            host=env.get("BIND", "0.0.0.0"),
            port=port,
            media_root=env.get("AMNEZIC_MEDIA_ROOT", "").strip().rstrip("/"),
            log_level=env.get("AMNEZIC_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


_OVERRIDES: list[dict[str, bool]] = []


def is_enabled(flag: str, environ: Mapping[str, str] | None = None) -> bool:
    """Return whether *flag* is on; the innermost ``override`` wins over the env var."""

    key = flag.strip().lower()
    for forced in reversed(_OVERRIDES):
        if key in forced:
            return forced[key]
    env = os.environ if environ is None else environ
    return key in {name.strip().lower() for name in env.get(_FEATURES_VAR, "").split(",")}


@contextmanager
def override(flag: str, enabled: bool = True) -> Iterator[None]:
    _OVERRIDES.append({flag.strip().lower(): enabled})
    try:
        yield
    finally:
        _OVERRIDES.pop()
