"""
FILE: kanban_tui/core/models.py
PURPOSE: Domain models for tasks and columns
EXPORTS:
  - Task (dataclass)
  - Column (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - json (stdlib)
  - typing (stdlib)
NOTES:
  - All models have from_row() for SQLite row conversion
  - All models have to_json() for serialization
  - Column owns its selection cursor; None means the column is empty
  - No persistence knowledge here, the Board writes changes through the store
"""

from dataclasses import dataclass, field, asdict
from typing import List, Optional
import json


@dataclass
class Task:
    """A task with a title and a (possibly multi-line) description."""

    id: int
    title: str = ""
    description: str = ""

    @classmethod
    def from_row(cls, row) -> "Task":
        """Convert SQLite row to Task object."""
        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"],
        )

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(asdict(self), indent=2)


@dataclass
class Column:
    """
    A board column (e.g., Todo, In Progress, Done) with its ordered tasks.

    Attributes:
        id: Database ID of the column
        name: Display name
        tasks: Tasks in display order
        selected_task_idx: Index of the highlighted task, or None when empty
    """

    id: int
    name: str
    tasks: List[Task] = field(default_factory=list)
    selected_task_idx: Optional[int] = None

    def __post_init__(self):
        self.selected_task_idx = self.clamp_index(self.selected_task_idx)

    @classmethod
    def from_row(cls, row, tasks: List[Task]) -> "Column":
        """Convert SQLite row plus its loaded tasks to a Column object."""
        return cls(
            id=row["id"],
            name=row["name"],
            tasks=tasks,
            selected_task_idx=row["selected_task"],
        )

    def to_json(self) -> str:
        """Serialize column (including tasks) to JSON string."""
        return json.dumps(asdict(self), indent=2)

    def clamp_index(self, index: Optional[int]) -> Optional[int]:
        """Return the nearest valid task index, or None if there are no tasks."""
        if not self.tasks:
            return None
        if index is None:
            return 0
        return min(max(index, 0), len(self.tasks) - 1)

    # --- Selection ---

    def get_selected_task(self) -> Optional[Task]:
        if self.selected_task_idx is None:
            return None
        return self.tasks[self.selected_task_idx]

    def select_previous_task(self) -> None:
        if self.selected_task_idx is None:
            self.selected_task_idx = self.clamp_index(None)
            return
        self.selected_task_idx = self.clamp_index(self.selected_task_idx - 1)

    def select_next_task(self) -> None:
        if self.selected_task_idx is None:
            self.selected_task_idx = self.clamp_index(None)
            return
        self.selected_task_idx = self.clamp_index(self.selected_task_idx + 1)

    def select_first_task(self) -> None:
        self.selected_task_idx = self.clamp_index(0)

    def select_last_task(self) -> None:
        self.selected_task_idx = self.clamp_index(len(self.tasks) - 1)

    # --- Membership ---

    def add_task(self, task: Task) -> None:
        """Append a task and select it."""
        self.tasks.append(task)
        self.select_last_task()

    def remove_selected_task(self) -> Optional[Task]:
        """
        Remove the selected task and repair the cursor.

        The cursor stays on the index the removed task had, which is now the
        following task; if there is none it falls back to the previous task,
        and to None once the column is empty.

        Returns:
            The removed Task, or None if the column was empty
        """
        if self.selected_task_idx is None:
            return None

        index = self.selected_task_idx
        task = self.tasks.pop(index)
        self.selected_task_idx = self.clamp_index(index)
        return task

    def swap_with_neighbour(self, offset: int) -> Optional[Task]:
        """
        Swap the selected task with the one `offset` (+1/-1) positions away.

        The cursor follows the moved task.

        Returns:
            The neighbour that was swapped with, or None at a boundary
        """
        index = self.selected_task_idx
        if index is None:
            return None

        other = index + offset
        if other < 0 or other >= len(self.tasks):
            return None

        self.tasks[index], self.tasks[other] = self.tasks[other], self.tasks[index]
        self.selected_task_idx = other
        return self.tasks[index]
