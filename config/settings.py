"""Configuration helpers for environment-driven settings."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

if os.getenv("PYTEST_CURRENT_TEST") is None:
    load_dotenv()


def normalize_site_url(value: str) -> str:
    site_url = value.strip().rstrip("/")
    if not site_url.startswith(("http://", "https://")):
        raise ValueError("SITE_URL must be an absolute http(s) URL")
    return site_url


def _resolve_path(value: str) -> Path:
    path = Path(value.strip())
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


@dataclass(slots=True)
class Settings:
    """Runtime application settings sourced from environment variables."""

    SITE_URL: str = field(init=False)
    ROADMAPS_DIR: Path = field(init=False)
    BEST_PRACTICES_DIR: Path = field(init=False)
    HOST: str = field(init=False)
    PORT: int = field(init=False)
    LOG_DIR: Path = field(init=False)
    LOG_LEVEL: str = field(init=False)

    def __post_init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        self.SITE_URL = normalize_site_url(os.getenv("SITE_URL", "https://roadmap.sh"))

        self.ROADMAPS_DIR = _resolve_path(os.getenv("ROADMAPS_DIR", "src/data/roadmaps"))
        self.BEST_PRACTICES_DIR = _resolve_path(
            os.getenv("BEST_PRACTICES_DIR", "src/data/best-practices")
        )

        self.HOST = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"

        try:
            port = int(os.getenv("PORT", "3000"))
        except ValueError as exc:
            raise ValueError("PORT must be an integer") from exc
        if not 0 < port < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        self.PORT = port

        self.LOG_DIR = _resolve_path(os.getenv("LOG_DIR", "logs"))

        level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL has unknown level {level!r}")
        self.LOG_LEVEL = level


settings = Settings()
