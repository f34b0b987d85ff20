"""
Configuration helpers for the Marquee sign backend.

Routers, services and scripts read settings through get_settings() instead of
touching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_STORAGE_DIR = Path.home() / ".marquee"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_dir: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    def _level(value: str | None, default: str = "INFO") -> str:
        candidate = (value or "").strip().upper()
        if candidate in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return candidate
        return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_dir=_path(os.getenv("MARQUEE_STORAGE_DIR"), DEFAULT_STORAGE_DIR),
        log_level=_level(os.getenv("MARQUEE_LOG_LEVEL")),
    )
