"""
FILE: kanban_tui/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - KanbanError (base exception)
  - StoreError
  - TaskNotFoundError
  - ColumnNotFoundError
  - EmptyBoardError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from KanbanError for easy catching
  - The store raises these, the board lets them propagate, UI layers catch
    them and end the session
"""


class KanbanError(Exception):
    """Base exception for all kanban-tui errors."""
    pass


class StoreError(KanbanError):
    """A read or write against the database failed."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Store operation '{operation}' failed: {cause}")


class TaskNotFoundError(KanbanError):
    """Task with given ID doesn't exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class ColumnNotFoundError(KanbanError):
    """Column with given ID doesn't exist."""

    def __init__(self, column_id: int):
        self.column_id = column_id
        super().__init__(f"Column {column_id} not found")


class EmptyBoardError(KanbanError):
    """The database holds no columns, so there is no board to show."""

    def __init__(self):
        super().__init__("Board has no columns")
