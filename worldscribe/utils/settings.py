"""Runtime configuration sourced from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple


DEFAULT_WORLDS_FOLDER = Path.home() / "WorldScribe" / "Worlds"
DEFAULT_CORS_ORIGINS = ("http://localhost", "http://localhost:3000")


@dataclass(frozen=True)
class Settings:
    worlds_folder: Path
    max_image_bytes: int
    default_page_size: int
    max_page_size: int
    cors_origins: Tuple[str, ...]
    log_level: str


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    """Return a positive integer from the environment, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= minimum else default


def _origins_env(name: str) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return DEFAULT_CORS_ORIGINS
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings."""
    worlds_folder = os.getenv("WORLDSCRIBE_WORLDS_FOLDER")
    return Settings(
        worlds_folder=Path(worlds_folder).expanduser() if worlds_folder else DEFAULT_WORLDS_FOLDER,
        max_image_bytes=_int_env("WORLDSCRIBE_MAX_IMAGE_BYTES", 2 * 1000 * 1000),
        default_page_size=_int_env("WORLDSCRIBE_DEFAULT_PAGE_SIZE", 10),
        max_page_size=_int_env("WORLDSCRIBE_MAX_PAGE_SIZE", 100),
        cors_origins=_origins_env("WORLDSCRIBE_CORS_ORIGINS"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def refresh_settings() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
