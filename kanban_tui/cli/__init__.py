"""
FILE: kanban_tui/cli/__init__.py
PURPOSE: Command-line interface package
"""
