"""
FILE: kanban_tui/cli/commands/system.py
PURPOSE: System commands (version)
"""

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, __version__


@app.command()
def version():
    """Show kanban-tui version."""
    console.print(f"kanban-tui v{__version__}")
