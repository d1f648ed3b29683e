"""
FILE: todolist/config.py
PURPOSE: Settings loaded from environment variables
EXPORTS:
  - Settings (dataclass)
  - get_settings() -> Settings (cached)
  - reset_settings() -> None
DEPENDENCIES:
  - os, dataclasses, pathlib (stdlib)
NOTES:
  - All variables use the TODOLIST_ prefix
  - Malformed values fall back to defaults instead of failing at startup
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TODOLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    raw = raw.strip().upper()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.

    Attributes:
        log_level: Level for the stderr log handler (TODOLIST_LOG_LEVEL)
        log_file: Optional file that receives DEBUG logs (TODOLIST_LOG_FILE)
        seed_sample_tasks: Load the two sample tasks on startup (TODOLIST_SEED)
        auto_render: Redraw the list after every change in the REPL (TODOLIST_AUTO_RENDER)
    """

    log_level: int = logging.WARNING
    log_file: Optional[Path] = None
    seed_sample_tasks: bool = True
    auto_render: bool = True


def load_settings() -> Settings:
    return Settings(
        log_level=_env_level(_k("LOG_LEVEL"), logging.WARNING),
        log_file=_env_path(_k("LOG_FILE")),
        seed_sample_tasks=_env_bool(_k("SEED"), True),
        auto_render=_env_bool(_k("AUTO_RENDER"), True),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return process-wide settings, reading the environment on first call."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings (tests change env vars between runs)."""
    global _settings
    _settings = None
