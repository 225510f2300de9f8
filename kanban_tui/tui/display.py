"""
FILE: kanban_tui/tui/display.py
PURPOSE: Turn the Board's read-only view into prompt_toolkit formatted text
EXPORTS:
  - STYLE (prompt_toolkit Style)
  - render_column(board, column_idx) -> StyleAndTextTuples
  - render_task_info(board) -> StyleAndTextTuples
  - render_editor(editor) -> StyleAndTextTuples
  - render_editor_title(board) -> str
  - render_status() -> StyleAndTextTuples
DEPENDENCIES:
  - prompt_toolkit (styles, formatted text types)
  - kanban_tui.core (Board, TaskEditor, EditFocus)
NOTES:
  - Pure functions of board state; never mutate the board
  - Style classes are looked up in STYLE
"""

from typing import Optional

from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.styles import Style

from ..core.board import Board
from ..core.editor import EditFocus, TaskEditor

STYLE = Style.from_dict({
    "column.header": "bold",
    "column.header.active": "bold reverse ansicyan",
    "column.empty": "italic ansigray",
    "task": "",
    "task.cursor": "ansicyan",
    "task.selected": "bold reverse ansicyan",
    "info.title": "bold ansigreen",
    "info.empty": "italic ansigray",
    "editor.label": "bold",
    "editor.label.focused": "bold ansiyellow",
    "editor.field": "bg:#333333",
    "button": "",
    "button.focused": "reverse ansiyellow",
    "status": "bg:#444444 #ffffff",
})

KEY_HINTS = [
    ("h/l", "column"),
    ("j/k", "task"),
    ("H/L", "move column"),
    ("J/K", "move up/down"),
    ("n", "new"),
    ("e", "edit"),
    ("D", "delete"),
    ("q", "quit"),
]


def render_column(board: Board, column_idx: int) -> StyleAndTextTuples:
    """
    Render one column: a header with the task count, then one line per task.

    The selected task is highlighted strongly in the active column and
    lightly in the others.
    """
    column = board.columns[column_idx]
    is_active = column_idx == board.selected_column_idx

    header_style = "class:column.header.active" if is_active else "class:column.header"
    fragments: StyleAndTextTuples = [
        (header_style, f" {column.name} ({len(column.tasks)}) "),
        ("", "\n\n"),
    ]

    if not column.tasks:
        fragments.append(("class:column.empty", " no tasks\n"))
        return fragments

    for idx, task in enumerate(column.tasks):
        if idx == column.selected_task_idx:
            style = "class:task.selected" if is_active else "class:task.cursor"
        else:
            style = "class:task"
        # Only the first line of a title fits in a column
        title = task.title.splitlines()[0] if task.title else "(untitled)"
        fragments.append((style, f" {title} "))
        fragments.append(("", "\n"))

    return fragments


def render_task_info(board: Board) -> StyleAndTextTuples:
    """Render the selected task's title and full description."""
    task = board.get_selected_task()
    if task is None:
        return [("class:info.empty", " No task selected")]

    fragments: StyleAndTextTuples = [("class:info.title", f" {task.title}\n")]
    for line in task.description.splitlines():
        fragments.append(("", f" {line}\n"))
    return fragments


def render_editor_title(board: Board) -> str:
    editor = board.task_editor
    if editor is not None and editor.is_edit:
        return "Edit Task"
    return "Create Task"


def _label_style(editor: TaskEditor, focus: EditFocus) -> str:
    return "class:editor.label.focused" if editor.focus == focus else "class:editor.label"


def _button_style(editor: TaskEditor, focus: EditFocus) -> str:
    return "class:button.focused" if editor.focus == focus else "class:button"


def render_editor(editor: Optional[TaskEditor]) -> StyleAndTextTuples:
    """Render the overlay fields and buttons, highlighting the focused one."""
    if editor is None:
        return []

    fragments: StyleAndTextTuples = [
        (_label_style(editor, EditFocus.TITLE), "Title\n"),
        ("class:editor.field", f"{editor.title}\n"),
        ("", "\n"),
        (_label_style(editor, EditFocus.DESCRIPTION), "Description\n"),
    ]
    for line in editor.description.split("\n"):
        fragments.append(("class:editor.field", f"{line}\n"))

    fragments.extend([
        ("", "\n"),
        (_button_style(editor, EditFocus.CONFIRM_BUTTON), "[ Confirm ]"),
        ("", "  "),
        (_button_style(editor, EditFocus.CANCEL_BUTTON), "[ Cancel ]"),
    ])
    return fragments


def render_status() -> StyleAndTextTuples:
    hints = "  ".join(f"{keys}: {action}" for keys, action in KEY_HINTS)
    return [("class:status", f" {hints} ")]
