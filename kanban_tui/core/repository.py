"""
FILE: kanban_tui/core/repository.py
PURPOSE: SQLite persistence for the board, keeping stored task order in step with memory
EXPORTS:
  - OrderedStore (class)
    - open(path) -> OrderedStore
    - load_columns() -> List[Column]
    - create_task(title, description, column_id) -> Task
    - get_task(task_id) -> Task | None
    - delete_task(task_id) -> None
    - update_task_text(task_id, title, description) -> None
    - swap_ranks(task_id_a, task_id_b) -> None
    - relocate_task(task_id, column_id) -> None
    - set_column_selection(column_id, task_idx) -> None
    - set_active_column(column_idx) -> None
    - get_active_column() -> int
    - close() -> None
  - init_database(conn) -> None
DEPENDENCIES:
  - sqlite3 (stdlib)
  - pathlib (stdlib)
  - logging (stdlib)
  - kanban_tui.core.models (Task, Column)
  - kanban_tui.core.exceptions (StoreError, TaskNotFoundError, ColumnNotFoundError)
NOTES:
  - One store per connection; the connection lives for the whole session
  - Returns domain objects (Task, Column), never raw rows
  - Ranks (task.sort_order) are unique; only their relative order matters
  - Every sqlite3.Error is logged and re-raised as StoreError
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .constants import STAGING_RANK, STATE_SELECTED_COLUMN
from .exceptions import ColumnNotFoundError, StoreError, TaskNotFoundError
from .models import Column, Task

logger = logging.getLogger(__name__)

# Schema file location (bundled with the package)
SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def init_database(conn: sqlite3.Connection) -> None:
    """
    Initialize database schema if tables don't exist.

    Executes schema.sql to create tables and the default columns.
    Safe to call multiple times.
    """
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='task'"
    )
    tables_exist = cursor.fetchone() is not None

    if not tables_exist:
        logger.info("Initializing database schema")
        with open(SCHEMA_PATH, "r") as f:
            schema_sql = f.read()

        conn.executescript(schema_sql)
        conn.commit()


class OrderedStore:
    """
    Durable, rank-ordered storage for columns, tasks and selection cursors.

    The Board calls one of these methods after each in-memory mutation so
    that the database agrees with what is on screen.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @classmethod
    def open(cls, path: Union[str, Path]) -> "OrderedStore":
        """
        Connect to the database at `path`, creating it if needed.

        Args:
            path: Database file, or ":memory:" for a throwaway store

        Raises:
            StoreError: If the database can't be opened or initialized
        """
        try:
            if str(path) != ":memory:":
                Path(path).parent.mkdir(parents=True, exist_ok=True)

            conn = sqlite3.connect(str(path))
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            init_database(conn)
        except (sqlite3.Error, OSError) as e:
            logger.error("Could not open database %s: %s", path, e)
            raise StoreError("open", e) from e

        logger.debug("Opened database %s", path)
        return cls(conn)

    def close(self) -> None:
        """Release the connection."""
        self.conn.close()

    def __enter__(self) -> "OrderedStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[sqlite3.Connection]:
        """Run the enclosed statements as one transaction, wrapping failures."""
        try:
            with self.conn:
                yield self.conn
        except sqlite3.Error as e:
            logger.error("Store operation %s failed: %s", operation, e)
            raise StoreError(operation, e) from e

    def _query(self, operation: str, sql: str, params=()) -> List[sqlite3.Row]:
        try:
            return self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            logger.error("Store operation %s failed: %s", operation, e)
            raise StoreError(operation, e) from e

    # --- Loading ---

    def load_columns(self) -> List[Column]:
        """
        Load every column with its tasks.

        Returns:
            Columns ordered by position, each with tasks ordered by rank
            (ties broken by ID) and a selection cursor clamped into range
        """
        column_rows = self._query(
            "load_columns",
            "SELECT id, name, selected_task FROM kb_column ORDER BY position, id",
        )

        columns = []
        for row in column_rows:
            task_rows = self._query(
                "load_columns",
                "SELECT id, title, description, sort_order FROM task "
                "WHERE column_id = ? ORDER BY sort_order, id",
                (row["id"],),
            )
            for task_row in task_rows:
                if not isinstance(task_row["sort_order"], int):
                    raise StoreError(
                        "load_columns",
                        ValueError(f"Malformed rank {task_row['sort_order']!r} for task {task_row['id']}"),
                    )
            tasks = [Task.from_row(task_row) for task_row in task_rows]

            stored = row["selected_task"]
            if stored is not None and not isinstance(stored, int):
                raise StoreError(
                    "load_columns",
                    ValueError(f"Malformed selection {stored!r} for column {row['id']}"),
                )

            column = Column.from_row(row, tasks)
            if stored != column.selected_task_idx:
                logger.warning(
                    "Column %s had stale selection %s, clamped to %s",
                    row["id"], stored, column.selected_task_idx,
                )
            columns.append(column)

        return columns

    def get_task(self, task_id: int) -> Optional[Task]:
        """
        Fetch single task by ID.

        Returns:
            Task object if found, None otherwise
        """
        rows = self._query(
            "get_task",
            "SELECT id, title, description FROM task WHERE id = ?",
            (task_id,),
        )
        return Task.from_row(rows[0]) if rows else None

    def get_task_rank(self, task_id: int) -> Optional[int]:
        """Return the stored rank of a task, or None if it doesn't exist."""
        rows = self._query(
            "get_task_rank", "SELECT sort_order FROM task WHERE id = ?", (task_id,)
        )
        return rows[0]["sort_order"] if rows else None

    # --- Task writes ---

    def create_task(self, title: str, description: str, column_id: int) -> Task:
        """
        Create a task at the end of a column.

        Args:
            title: Task title (may be empty)
            description: Task description (may be empty or multi-line)
            column_id: Column to place the task in

        Returns:
            Newly created Task with its assigned ID

        Note:
            The new rank is one past the current maximum, so the task sorts
            last in its column.
        """
        with self._transaction("create_task") as conn:
            cursor = conn.execute(
                """
                INSERT INTO task (title, description, column_id, sort_order)
                VALUES (?, ?, ?, (SELECT COALESCE(MAX(sort_order), 0) + 1 FROM task))
                """,
                (title, description, column_id),
            )
            task_id = cursor.lastrowid

        logger.debug("Created task %s in column %s", task_id, column_id)
        return Task(id=task_id, title=title, description=description)

    def delete_task(self, task_id: int) -> None:
        """
        Delete task by ID.

        Raises:
            TaskNotFoundError: If task doesn't exist
        """
        with self._transaction("delete_task") as conn:
            cursor = conn.execute("DELETE FROM task WHERE id = ?", (task_id,))
            if cursor.rowcount == 0:
                raise TaskNotFoundError(task_id)

        logger.debug("Deleted task %s", task_id)

    def update_task_text(self, task_id: int, title: str, description: str) -> None:
        """
        Overwrite a task's title and description.

        Raises:
            TaskNotFoundError: If task doesn't exist
        """
        with self._transaction("update_task_text") as conn:
            cursor = conn.execute(
                "UPDATE task SET title = ?, description = ? WHERE id = ?",
                (title, description, task_id),
            )
            if cursor.rowcount == 0:
                raise TaskNotFoundError(task_id)

        logger.debug("Updated text of task %s", task_id)

    def swap_ranks(self, task_id_a: int, task_id_b: int) -> None:
        """
        Exchange the stored ranks of two tasks in a single transaction.

        Ranks are unique, so task A is parked on STAGING_RANK while B takes
        its place. Either both ranks change or neither does.

        Raises:
            TaskNotFoundError: If either task doesn't exist
            StoreError: If any of the writes fail (nothing is changed)
        """
        with self._transaction("swap_ranks") as conn:
            ranks = {}
            for task_id in (task_id_a, task_id_b):
                row = conn.execute(
                    "SELECT sort_order FROM task WHERE id = ?", (task_id,)
                ).fetchone()
                if row is None:
                    raise TaskNotFoundError(task_id)
                ranks[task_id] = row["sort_order"]

            conn.execute(
                "UPDATE task SET sort_order = ? WHERE id = ?", (STAGING_RANK, task_id_a)
            )
            conn.execute(
                "UPDATE task SET sort_order = ? WHERE id = ?",
                (ranks[task_id_a], task_id_b),
            )
            conn.execute(
                "UPDATE task SET sort_order = ? WHERE id = ?",
                (ranks[task_id_b], task_id_a),
            )

        logger.debug("Swapped ranks of tasks %s and %s", task_id_a, task_id_b)

    def relocate_task(self, task_id: int, column_id: int) -> None:
        """
        Move a task to the end of another column.

        Raises:
            TaskNotFoundError: If task doesn't exist
            ColumnNotFoundError: If column doesn't exist
        """
        with self._transaction("relocate_task") as conn:
            column = conn.execute(
                "SELECT id FROM kb_column WHERE id = ?", (column_id,)
            ).fetchone()
            if column is None:
                raise ColumnNotFoundError(column_id)

            cursor = conn.execute(
                """
                UPDATE task
                SET column_id = ?,
                    sort_order = (SELECT COALESCE(MAX(sort_order), 0) + 1 FROM task)
                WHERE id = ?
                """,
                (column_id, task_id),
            )
            if cursor.rowcount == 0:
                raise TaskNotFoundError(task_id)

        logger.debug("Relocated task %s to column %s", task_id, column_id)

    # --- Cursors ---

    def set_column_selection(self, column_id: int, task_idx: Optional[int]) -> None:
        """Persist a column's selection cursor (None for an empty column)."""
        with self._transaction("set_column_selection") as conn:
            cursor = conn.execute(
                "UPDATE kb_column SET selected_task = ? WHERE id = ?",
                (task_idx, column_id),
            )
            if cursor.rowcount == 0:
                raise ColumnNotFoundError(column_id)

    def set_active_column(self, column_idx: int) -> None:
        """Persist the index of the active column."""
        with self._transaction("set_active_column") as conn:
            conn.execute(
                "INSERT OR REPLACE INTO app_state (key, value) VALUES (?, ?)",
                (STATE_SELECTED_COLUMN, str(column_idx)),
            )

    def get_active_column(self) -> int:
        """
        Read the index of the active column.

        Returns:
            The stored index, or 0 if none has been stored yet

        Raises:
            StoreError: If the stored value isn't an integer
        """
        rows = self._query(
            "get_active_column",
            "SELECT value FROM app_state WHERE key = ?",
            (STATE_SELECTED_COLUMN,),
        )
        if not rows:
            return 0

        value = rows[0]["value"]
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            logger.error("Malformed active column value %r", value)
            raise StoreError("get_active_column", e) from e
