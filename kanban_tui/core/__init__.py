"""
FILE: kanban_tui/core/__init__.py
PURPOSE: Board engine and its SQLite persistence
"""

from .board import Board
from .editor import EditFocus, TaskEditor
from .models import Column, Task
from .repository import OrderedStore

__all__ = ["Board", "Column", "EditFocus", "OrderedStore", "Task", "TaskEditor"]
