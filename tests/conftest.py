"""Shared pytest configuration and fixtures for tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kanban_tui.core.board import Board  # noqa: E402
from kanban_tui.core.repository import OrderedStore  # noqa: E402


@pytest.fixture
def store():
    """Isolated in-memory store with the default columns."""
    store = OrderedStore.open(":memory:")
    yield store
    store.close()


@pytest.fixture
def board(store):
    """Board loaded from a fresh store (Todo, In Progress, Done, Ideas)."""
    return Board.load(store)


def reload(board: Board) -> Board:
    """Build a new Board from the same store, as a restart would."""
    return Board.load(board.store)


def titles(column) -> list:
    return [task.title for task in column.tasks]
