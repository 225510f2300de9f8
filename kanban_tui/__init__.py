"""kanban-tui: a single-user terminal kanban board backed by SQLite."""

__version__ = "0.1.0"
