"""
FILE: kanban_tui/cli/commands/board.py
PURPOSE: Board commands (show)
"""

import json
from dataclasses import asdict

import typer
from rich.table import Table

from ..main import app, console, error_console
from ...core.board import Board
from ...core.exceptions import KanbanError
from ...core.repository import OrderedStore


def _board_to_dict(board: Board) -> dict:
    return {
        "selected_column": board.selected_column_idx,
        "columns": [asdict(column) for column in board.columns],
    }


def _board_table(board: Board) -> Table:
    """One table column per board column, tasks listed top to bottom."""
    table = Table(show_header=True, header_style="bold", expand=True)

    for idx, column in enumerate(board.columns):
        header = f"{column.name} ({len(column.tasks)})"
        if idx == board.selected_column_idx:
            header = f"[reverse cyan]{header}[/reverse cyan]"
        table.add_column(header, overflow="fold")

    depth = max(len(column.tasks) for column in board.columns)
    for row in range(depth):
        cells = []
        for column in board.columns:
            if row >= len(column.tasks):
                cells.append("")
                continue

            task = column.tasks[row]
            label = f"[dim]#{task.id}[/dim] {task.title}"
            if row == column.selected_task_idx:
                label = f"[bold cyan]▶[/bold cyan] {label}"
            cells.append(label)
        table.add_row(*cells)

    return table


@app.command()
def show(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Print the board without starting the interactive UI.

    Example:
        kanban-tui show
        kanban-tui --db ./work.db show --json
    """
    settings = ctx.obj
    try:
        with OrderedStore.open(settings.db_path) as store:
            board = Board.load(store)
    except KanbanError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(_board_to_dict(board), indent=2))
    elif raw:
        for column in board.columns:
            print(f"{column.name}:")
            for idx, task in enumerate(column.tasks):
                marker = "*" if idx == column.selected_task_idx else " "
                print(f" {marker} {task.id}: {task.title}")
    else:
        console.print(_board_table(board))
