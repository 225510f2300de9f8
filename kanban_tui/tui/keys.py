"""
FILE: kanban_tui/tui/keys.py
PURPOSE: Translate key presses into Board operations
EXPORTS:
  - BOARD_KEYS: key -> Board method name while browsing the board
  - QUIT_KEYS: keys that end the session
  - handle_board_key(board, key) -> bool
  - handle_editor_key(board, key, data) -> None
  - create_key_bindings(board) -> KeyBindings
DEPENDENCIES:
  - prompt_toolkit (KeyBindings, Condition)
  - kanban_tui.core (Board, EditFocus, KanbanError)
NOTES:
  - Two modes: board mode when no overlay is open, editor mode otherwise
  - Key names follow prompt_toolkit ("left", "s-tab", "enter", ...)
  - A KanbanError from any handler ends the application with that error
"""

import logging

from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings

from ..core.board import Board
from ..core.editor import EditFocus
from ..core.exceptions import KanbanError

logger = logging.getLogger(__name__)

BOARD_KEYS = {
    "h": "select_column_left",
    "left": "select_column_left",
    "l": "select_column_right",
    "right": "select_column_right",
    "k": "select_task_above",
    "up": "select_task_above",
    "j": "select_task_below",
    "down": "select_task_below",
    "g": "select_task_first",
    "G": "select_task_last",
    "H": "move_task_column_left",
    "<": "move_task_column_left",
    "L": "move_task_column_right",
    ">": "move_task_column_right",
    "K": "move_task_up",
    "-": "move_task_up",
    "J": "move_task_down",
    "=": "move_task_down",
    "n": "open_new_task_editor",
    "e": "open_edit_task_editor",
    "D": "delete_task",
}

QUIT_KEYS = ("q",)

EDITOR_KEYS = ("tab", "s-tab", "enter", "escape", "backspace")


def handle_board_key(board: Board, key: str) -> bool:
    """
    Run the Board operation bound to `key`.

    Returns:
        False if the key asks to quit, True otherwise (unbound keys are ignored)
    """
    if key in QUIT_KEYS:
        return False

    action = BOARD_KEYS.get(key)
    if action:
        getattr(board, action)()
    return True


def handle_editor_key(board: Board, key: str, data: str = "") -> None:
    """
    Apply a key press to the open task overlay.

    Args:
        board: Board whose overlay is open
        key: One of EDITOR_KEYS, or "" for plain typed text
        data: The typed text for plain keys
    """
    editor = board.task_editor
    if editor is None:
        return

    if key == "tab":
        editor.focus_next()
    elif key == "s-tab":
        editor.focus_previous()
    elif key == "escape":
        board.close_task_editor()
    elif key == "backspace":
        editor.delete_char()
    elif key == "enter":
        if editor.focus == EditFocus.DESCRIPTION:
            editor.insert_newline()
        elif editor.focus == EditFocus.CONFIRM_BUTTON:
            board.commit_task_editor()
        elif editor.focus == EditFocus.CANCEL_BUTTON:
            board.close_task_editor()
    elif data and data.isprintable():
        editor.insert_text(data)


def create_key_bindings(board: Board) -> KeyBindings:
    """Build the application's key bindings for `board`."""
    kb = KeyBindings()
    board_mode = Condition(lambda: board.task_editor is None)
    editor_mode = ~board_mode

    def guarded(handler):
        def run(event):
            try:
                handler(event)
            except KanbanError as e:
                logger.error("Ending session: %s", e)
                event.app.exit(exception=e)
        return run

    def board_handler(key):
        def handle(event):
            if not handle_board_key(board, key):
                event.app.exit()
        return handle

    def editor_handler(key):
        def handle(event):
            handle_editor_key(board, key, event.data)
        return handle

    for key in list(BOARD_KEYS) + list(QUIT_KEYS):
        kb.add(key, filter=board_mode)(guarded(board_handler(key)))

    for key in EDITOR_KEYS:
        kb.add(key, filter=editor_mode)(guarded(editor_handler(key)))

    kb.add("<any>", filter=editor_mode)(guarded(editor_handler("")))

    @kb.add("c-c")
    def _(event):
        event.app.exit()

    return kb
