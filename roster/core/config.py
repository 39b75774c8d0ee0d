"""
Configuration helpers for the roster manager.

Settings are read from environment variables once and cached; the CLI layers
its own options on top with :func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


DEFAULT_DATA_FILE = "school_data.json"
DEFAULT_LOG_DIR = "logs"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_file: Path
    log_dir: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        data_file=Path(os.getenv("ROSTER_DATA_FILE") or DEFAULT_DATA_FILE),
        log_dir=Path(os.getenv("ROSTER_LOG_DIR") or DEFAULT_LOG_DIR),
        log_level=(os.getenv("ROSTER_LOG_LEVEL") or "INFO").upper(),
    )
