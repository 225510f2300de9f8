"""
FILE: kanban_tui/core/config.py
PURPOSE: Runtime settings and logging setup
EXPORTS:
  - Settings (dataclass)
  - configure_logging(settings) -> None
DEPENDENCIES:
  - dataclasses, logging, os, pathlib (stdlib)
NOTES:
  - Defaults live under ~/.kanban-tui/
  - KANBAN_TUI_DB / KANBAN_TUI_LOG override the defaults; CLI options
    override the environment
  - Logs go to a file because the full-screen UI owns the terminal
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_DB_NAME,
    DEFAULT_DIR,
    DEFAULT_LOG_NAME,
    ENV_DB_PATH,
    ENV_LOG_PATH,
)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


@dataclass
class Settings:
    """Where the database and log file live, and how chatty logging is."""

    db_path: Path = DEFAULT_DIR / DEFAULT_DB_NAME
    log_path: Path = DEFAULT_DIR / DEFAULT_LOG_NAME
    verbose: bool = False

    @classmethod
    def from_env(
        cls,
        db_path: Optional[Path] = None,
        log_path: Optional[Path] = None,
        verbose: bool = False,
    ) -> "Settings":
        """Build settings from explicit values, falling back to the environment."""
        if db_path is None and os.environ.get(ENV_DB_PATH):
            db_path = Path(os.environ[ENV_DB_PATH])
        if log_path is None and os.environ.get(ENV_LOG_PATH):
            log_path = Path(os.environ[ENV_LOG_PATH])

        settings = cls(verbose=verbose)
        if db_path is not None:
            settings.db_path = Path(db_path).expanduser()
        if log_path is not None:
            settings.log_path = Path(log_path).expanduser()
        return settings


def configure_logging(settings: Settings) -> None:
    """Send log records to the settings' log file."""
    settings.log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.FileHandler(settings.log_path, encoding="utf-8")],
    )
