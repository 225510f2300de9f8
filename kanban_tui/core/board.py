"""
FILE: kanban_tui/core/board.py
PURPOSE: In-memory board state and every operation that changes it
EXPORTS:
  - Board (class)
    - load(store) -> Board
    - get_selected_column() -> Column
    - get_selected_task() -> Task | None
    - select_column_left() / select_column_right()
    - select_task_above() / select_task_below() / select_task_first() / select_task_last()
    - move_task_up() / move_task_down() -> bool
    - move_task_column_left() / move_task_column_right() -> bool
    - add_new_task(title, description) -> Task
    - edit_task(title, description) -> bool
    - delete_task() -> bool
    - open_new_task_editor() / open_edit_task_editor() / close_task_editor() / commit_task_editor()
DEPENDENCIES:
  - logging (stdlib)
  - kanban_tui.core.repository (OrderedStore)
  - kanban_tui.core.models (Task, Column)
  - kanban_tui.core.editor (TaskEditor)
  - kanban_tui.core.exceptions (EmptyBoardError, StoreError)
NOTES:
  - The Board is the only writer of Task/Column data
  - Each operation mutates memory first, then writes the same change through
    the store
  - Boundary conditions (first/last task or column, empty column) are no-ops
  - Store failures propagate as KanbanError subclasses; memory is NOT rolled
    back, callers are expected to end the session
"""

import logging
from typing import List, Optional

from .editor import TaskEditor
from .exceptions import EmptyBoardError
from .models import Column, Task
from .repository import OrderedStore

logger = logging.getLogger(__name__)


class Board:
    """
    The full set of columns plus the active-column cursor.

    Attributes:
        store: Persistence layer every change is written through
        columns: Columns in display order (fixed for the session)
        selected_column_idx: Index of the active column
        task_editor: Open create/edit overlay, or None
    """

    def __init__(self, store: OrderedStore, columns: List[Column], selected_column_idx: int = 0):
        if not columns:
            raise EmptyBoardError()

        self.store = store
        self.columns = columns
        self.selected_column_idx = min(max(selected_column_idx, 0), len(columns) - 1)
        self.task_editor: Optional[TaskEditor] = None

        if self.selected_column_idx != selected_column_idx:
            logger.warning(
                "Active column %s out of range, clamped to %s",
                selected_column_idx, self.selected_column_idx,
            )

    @classmethod
    def load(cls, store: OrderedStore) -> "Board":
        """
        Build a Board from everything in the store.

        Raises:
            StoreError: If loading fails or stored cursors are malformed
            EmptyBoardError: If the store has no columns
        """
        columns = store.load_columns()
        selected_column_idx = store.get_active_column()
        logger.debug(
            "Loaded %d columns, active column %s", len(columns), selected_column_idx
        )
        return cls(store, columns, selected_column_idx)

    # --- Read-only view ---

    def get_selected_column(self) -> Column:
        return self.columns[self.selected_column_idx]

    def get_selected_task(self) -> Optional[Task]:
        return self.get_selected_column().get_selected_task()

    # --- Column selection ---

    def select_column_left(self) -> None:
        self._select_column(self.selected_column_idx - 1)

    def select_column_right(self) -> None:
        self._select_column(self.selected_column_idx + 1)

    def _select_column(self, column_idx: int) -> None:
        column_idx = min(max(column_idx, 0), len(self.columns) - 1)
        if column_idx == self.selected_column_idx:
            return

        self.selected_column_idx = column_idx
        self.store.set_active_column(column_idx)

    # --- Task selection ---

    def select_task_above(self) -> None:
        self.get_selected_column().select_previous_task()
        self._persist_selection(self.get_selected_column())

    def select_task_below(self) -> None:
        self.get_selected_column().select_next_task()
        self._persist_selection(self.get_selected_column())

    def select_task_first(self) -> None:
        self.get_selected_column().select_first_task()
        self._persist_selection(self.get_selected_column())

    def select_task_last(self) -> None:
        self.get_selected_column().select_last_task()
        self._persist_selection(self.get_selected_column())

    def _persist_selection(self, column: Column) -> None:
        self.store.set_column_selection(column.id, column.selected_task_idx)

    # --- Reordering within a column ---

    def move_task_up(self) -> bool:
        """Swap the selected task with the one above it. Returns False at the top."""
        return self._move_task(-1)

    def move_task_down(self) -> bool:
        """Swap the selected task with the one below it. Returns False at the bottom."""
        return self._move_task(1)

    def _move_task(self, offset: int) -> bool:
        column = self.get_selected_column()
        moved = column.get_selected_task()
        neighbour = column.swap_with_neighbour(offset)
        if moved is None or neighbour is None:
            return False

        logger.debug("Moving task %s past task %s", moved.id, neighbour.id)
        self.store.swap_ranks(moved.id, neighbour.id)
        self._persist_selection(column)
        return True

    # --- Moving between columns ---

    def move_task_column_left(self) -> bool:
        """Move the selected task to the end of the previous column."""
        return self._move_task_to_column(-1)

    def move_task_column_right(self) -> bool:
        """Move the selected task to the end of the next column."""
        return self._move_task_to_column(1)

    def _move_task_to_column(self, offset: int) -> bool:
        """
        Transfer the selected task to the neighbouring column and follow it.

        Persists, in order: the task's new column and rank, the destination
        cursor, the active column, and finally the repaired source cursor.

        Returns:
            True if a task moved, False for an empty column or the board edge
        """
        destination_idx = self.selected_column_idx + offset
        if destination_idx < 0 or destination_idx >= len(self.columns):
            return False

        source = self.get_selected_column()
        task = source.remove_selected_task()
        if task is None:
            return False

        self.selected_column_idx = destination_idx
        destination = self.get_selected_column()
        destination.add_task(task)

        logger.debug(
            "Moving task %s from column %s to column %s",
            task.id, source.id, destination.id,
        )
        self.store.relocate_task(task.id, destination.id)
        self._persist_selection(destination)
        self.store.set_active_column(self.selected_column_idx)
        self._persist_selection(source)
        return True

    # --- Create / edit / delete ---

    def add_new_task(self, title: str, description: str) -> Task:
        """
        Create a task at the end of the active column and select it.

        Returns:
            The new Task, with the ID the store assigned
        """
        column = self.get_selected_column()
        task = self.store.create_task(title, description, column.id)
        column.add_task(task)
        self._persist_selection(column)
        return task

    def edit_task(self, title: str, description: str) -> bool:
        """
        Overwrite the selected task's title and description.

        Returns:
            False if the active column is empty, True otherwise
        """
        task = self.get_selected_task()
        if task is None:
            return False

        task.title = title
        task.description = description
        self.store.update_task_text(task.id, title, description)
        return True

    def delete_task(self) -> bool:
        """
        Delete the selected task.

        The cursor moves to the following task, or the previous one if the
        deleted task was last.

        Returns:
            False if the active column is empty, True otherwise
        """
        column = self.get_selected_column()
        task = column.remove_selected_task()
        if task is None:
            return False

        logger.debug("Deleting task %s from column %s", task.id, column.id)
        self.store.delete_task(task.id)
        self._persist_selection(column)
        return True

    # --- Task overlay lifecycle ---

    def open_new_task_editor(self) -> TaskEditor:
        self.task_editor = TaskEditor()
        return self.task_editor

    def open_edit_task_editor(self) -> Optional[TaskEditor]:
        """Open the overlay pre-filled from the selected task (None if there is none)."""
        task = self.get_selected_task()
        if task is None:
            return None

        self.task_editor = TaskEditor(
            title=task.title,
            description=task.description,
            is_edit=True,
        )
        return self.task_editor

    def close_task_editor(self) -> None:
        self.task_editor = None

    def commit_task_editor(self) -> None:
        """Save the overlay's text as a new or edited task and close it."""
        editor = self.task_editor
        if editor is None:
            return

        self.task_editor = None
        if editor.is_edit:
            self.edit_task(editor.title, editor.description)
        else:
            self.add_new_task(editor.title, editor.description)
