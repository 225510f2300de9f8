"""
Tests for the command-line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from kanban_tui import __version__
from kanban_tui.cli.main import app
from kanban_tui.core.board import Board
from kanban_tui.core.config import Settings
from kanban_tui.core.repository import OrderedStore

runner = CliRunner()


@pytest.fixture
def db_path(tmp_path):
    """Database with two tasks in Todo and one in Done, Done active."""
    path = tmp_path / "board.db"
    with OrderedStore.open(path) as store:
        board = Board.load(store)
        board.add_new_task("Write docs", "first draft")
        board.add_new_task("Fix bug", "")
        board.move_task_column_right()
        board.move_task_column_right()
    return path


def invoke(db_path, *args):
    log_path = db_path.parent / "kanban.log"
    return runner.invoke(app, ["--db", str(db_path), "--log-file", str(log_path), *args])


def test_show_json(db_path):
    result = invoke(db_path, "show", "--json")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["selected_column"] == 2
    assert [c["name"] for c in data["columns"]] == ["Todo", "In Progress", "Done", "Ideas"]
    assert [t["title"] for t in data["columns"][0]["tasks"]] == ["Write docs"]
    assert data["columns"][0]["tasks"][0]["description"] == "first draft"
    assert [t["title"] for t in data["columns"][2]["tasks"]] == ["Fix bug"]
    assert data["columns"][2]["selected_task_idx"] == 0


def test_show_raw(db_path):
    result = invoke(db_path, "show", "--raw")

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Todo:"
    assert lines[1].endswith(": Write docs")
    assert lines[1].startswith(" * ")
    assert "Done:" in lines


def test_show_table(db_path):
    result = invoke(db_path, "show")

    assert result.exit_code == 0
    assert "Todo" in result.stdout
    assert "Fix bug" in result.stdout


def test_show_reports_unusable_database(tmp_path):
    # A directory can't be opened as a database
    (tmp_path / "dir.db").mkdir()
    result = invoke(tmp_path / "dir.db", "show")
    assert result.exit_code == 1


def test_version(tmp_path):
    result = runner.invoke(app, ["--log-file", str(tmp_path / "kanban.log"), "version"])

    assert result.exit_code == 0
    assert f"kanban-tui v{__version__}" in result.stdout


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("KANBAN_TUI_DB", str(tmp_path / "env.db"))
    monkeypatch.delenv("KANBAN_TUI_LOG", raising=False)

    settings = Settings.from_env()
    assert settings.db_path == tmp_path / "env.db"
    assert settings.log_path.name == "kanban.log"

    explicit = Settings.from_env(db_path=tmp_path / "cli.db", verbose=True)
    assert explicit.db_path == tmp_path / "cli.db"
    assert explicit.verbose is True
