"""
FILE: kanban_tui/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

from .board import show
from .system import version

__all__ = ["show", "version"]
