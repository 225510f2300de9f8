"""
FILE: kanban_tui/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - DEFAULT_COLUMNS: Column names seeded into a new database
  - STATE_SELECTED_COLUMN: app_state key for the active column
  - STAGING_RANK: Temporary rank used while swapping two tasks
  - DEFAULT_DIR, DEFAULT_DB_NAME, DEFAULT_LOG_NAME: default file locations
DEPENDENCIES:
  - pathlib (stdlib)
NOTES:
  - DEFAULT_COLUMNS must match the seed rows in schema.sql
"""

from pathlib import Path

# Board layout (seeded by schema.sql, in display order)
DEFAULT_COLUMNS = ("Todo", "In Progress", "Done", "Ideas")

# app_state keys
STATE_SELECTED_COLUMN = "selected_column"

# Ranks are positive; this value is never assigned to a real task
STAGING_RANK = -1

# Default file locations
DEFAULT_DIR = Path.home() / ".kanban-tui"
DEFAULT_DB_NAME = "kanban.db"
DEFAULT_LOG_NAME = "kanban.log"

# Environment overrides
ENV_DB_PATH = "KANBAN_TUI_DB"
ENV_LOG_PATH = "KANBAN_TUI_LOG"
