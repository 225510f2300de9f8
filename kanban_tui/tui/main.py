"""
FILE: kanban_tui/tui/main.py
PURPOSE: Full-screen terminal board built on prompt_toolkit
EXPORTS:
  - create_application(board) -> Application
  - main(settings) - Open the store, load the board and run the UI
DEPENDENCIES:
  - prompt_toolkit (Application, layout containers, widgets)
  - kanban_tui.core (Board, OrderedStore, Settings)
  - kanban_tui.tui.display (rendering)
  - kanban_tui.tui.keys (key bindings)
NOTES:
  - One panel per column side by side, the selected task's details below,
    key hints at the bottom
  - The task overlay floats over the board while board.task_editor is set
  - A KanbanError raised by a key handler ends run() with that error
"""

import logging
from functools import partial

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.layout import (
    ConditionalContainer,
    Float,
    FloatContainer,
    HSplit,
    Layout,
    VSplit,
    Window,
)
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import Frame

from ..core.board import Board
from ..core.config import Settings
from ..core.repository import OrderedStore
from .display import (
    STYLE,
    render_column,
    render_editor,
    render_editor_title,
    render_status,
    render_task_info,
)
from .keys import create_key_bindings

logger = logging.getLogger(__name__)


def create_application(board: Board) -> Application:
    """Lay out the board and wire its key bindings."""
    columns = VSplit(
        [
            Window(
                content=FormattedTextControl(partial(render_column, board, idx)),
                wrap_lines=True,
            )
            for idx in range(len(board.columns))
        ],
        padding=1,
        padding_char="│",
    )

    task_info = Frame(
        Window(
            content=FormattedTextControl(lambda: render_task_info(board)),
            wrap_lines=True,
        ),
        title="Task",
        height=Dimension(min=4, preferred=8, max=12),
    )

    status_bar = Window(
        content=FormattedTextControl(render_status),
        height=1,
        style="class:status",
    )

    editor = Frame(
        Window(
            content=FormattedTextControl(lambda: render_editor(board.task_editor)),
            wrap_lines=True,
        ),
        title=lambda: render_editor_title(board),
        width=Dimension(preferred=60),
    )

    root = FloatContainer(
        content=HSplit([columns, task_info, status_bar]),
        floats=[
            Float(
                content=ConditionalContainer(
                    editor,
                    filter=Condition(lambda: board.task_editor is not None),
                )
            )
        ],
    )

    return Application(
        layout=Layout(root),
        key_bindings=create_key_bindings(board),
        style=STYLE,
        full_screen=True,
    )


def main(settings: Settings) -> None:
    """
    Run an interactive session against the configured database.

    Raises:
        KanbanError: If loading or any persist fails; the session ends
    """
    logger.info("Starting session with database %s", settings.db_path)
    with OrderedStore.open(settings.db_path) as store:
        board = Board.load(store)
        create_application(board).run()
    logger.info("Session ended")
