"""
Tests for the task overlay: focus ring, typing, commit and cancel.
"""

from kanban_tui.core.editor import EditFocus, TaskEditor
from conftest import reload


def test_focus_ring_cycles_both_ways():
    ring = [
        EditFocus.TITLE,
        EditFocus.DESCRIPTION,
        EditFocus.CONFIRM_BUTTON,
        EditFocus.CANCEL_BUTTON,
    ]
    for i, focus in enumerate(ring):
        assert focus.next() == ring[(i + 1) % 4]
        assert focus.previous() == ring[(i - 1) % 4]

    editor = TaskEditor()
    for _ in range(4):
        editor.focus_next()
    assert editor.focus == EditFocus.TITLE
    editor.focus_previous()
    assert editor.focus == EditFocus.CANCEL_BUTTON


def test_typing_goes_to_focused_field():
    editor = TaskEditor()
    editor.insert_text("Fix")
    editor.insert_text(" bug")
    editor.insert_newline()
    editor.delete_char()

    editor.focus_next()
    editor.insert_text("line one")
    editor.insert_newline()
    editor.insert_text("line two")

    editor.focus_next()
    editor.insert_text("ignored")
    editor.delete_char()

    assert editor.title == "Fix bu"
    assert editor.description == "line one\nline two"


def test_new_task_editor_commits_new_task(board):
    editor = board.open_new_task_editor()
    assert board.task_editor is editor
    assert editor.focus == EditFocus.TITLE
    assert editor.is_edit is False

    editor.title = "T1"
    editor.description = "D1"
    board.commit_task_editor()

    assert board.task_editor is None
    assert board.get_selected_task().title == "T1"
    assert reload(board).get_selected_task().description == "D1"


def test_edit_task_editor_is_prefilled_and_updates(board):
    task = board.add_new_task("T1", "D1")

    editor = board.open_edit_task_editor()
    assert (editor.title, editor.description) == ("T1", "D1")
    assert editor.is_edit is True
    assert editor.focus == EditFocus.TITLE

    editor.insert_text("!")
    board.commit_task_editor()

    assert len(board.get_selected_column().tasks) == 1
    assert board.get_selected_task().id == task.id
    assert reload(board).get_selected_task().title == "T1!"


def test_edit_editor_needs_a_selected_task(board):
    assert board.open_edit_task_editor() is None
    assert board.task_editor is None


def test_cancel_discards_text(board):
    editor = board.open_new_task_editor()
    editor.insert_text("never saved")

    board.close_task_editor()
    board.commit_task_editor()

    assert board.task_editor is None
    assert board.get_selected_task() is None
    assert all(c.tasks == [] for c in reload(board).columns)
