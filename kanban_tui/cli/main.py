"""
FILE: kanban_tui/cli/main.py
PURPOSE: Typer-based CLI entry point
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - show() - Print the board
  - version() - Show version
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - kanban_tui.core.config (Settings, configure_logging)
  - kanban_tui.tui (interactive mode)
NOTES:
  - Launches the interactive board when no command is given
  - Global options (--db, --log-file, --verbose) go before the command
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
"""

import sys
from pathlib import Path
from typing import Optional

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

from .. import __version__
from ..core.config import Settings, configure_logging
from ..core.exceptions import KanbanError

# Typer app setup
app = typer.Typer(
    name="kanban-tui",
    help="Single-user terminal kanban board",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    db: Optional[Path] = typer.Option(None, "--db", help="Database file (default: ~/.kanban-tui/kanban.db)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Log file (default: ~/.kanban-tui/kanban.log)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
):
    """
    Default callback - launches the board when no command is specified.

    If a subcommand is invoked, this only prepares settings and logging.
    """
    settings = Settings.from_env(db_path=db, log_path=log_file, verbose=verbose)
    configure_logging(settings)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        from ..tui import main as tui_main
        try:
            tui_main(settings)
        except KanbanError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import show, version  # noqa: E402,F401


def main():
    """Entry point for the kanban-tui console script."""
    app()


if __name__ == "__main__":
    main()
