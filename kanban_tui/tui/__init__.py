"""
FILE: kanban_tui/tui/__init__.py
PURPOSE: Terminal UI package for the interactive board
EXPORTS:
  - main() (from tui.main)
DEPENDENCIES:
  - prompt_toolkit (full-screen application, key bindings)
  - kanban_tui.core.board (board engine)
NOTES:
  - Entry point for interactive mode
"""

from .main import main

__all__ = ["main"]
