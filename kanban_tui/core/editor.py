"""
FILE: kanban_tui/core/editor.py
PURPOSE: Transient state of the create/edit task overlay
EXPORTS:
  - EditFocus (enum)
  - TaskEditor (dataclass)
DEPENDENCIES:
  - dataclasses, enum (stdlib)
NOTES:
  - Focus cycles through a fixed ring: Title -> Description -> Confirm -> Cancel
  - Holds plain text only; committing goes through the Board
"""

from dataclasses import dataclass
from enum import Enum


class EditFocus(Enum):
    """Which part of the task overlay has focus."""

    TITLE = "title"
    DESCRIPTION = "description"
    CONFIRM_BUTTON = "confirm"
    CANCEL_BUTTON = "cancel"

    def next(self) -> "EditFocus":
        members = list(EditFocus)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> "EditFocus":
        members = list(EditFocus)
        return members[(members.index(self) - 1) % len(members)]


@dataclass
class TaskEditor:
    """
    Text being typed into the task overlay.

    Attributes:
        title: Title text
        description: Description text (may contain newlines)
        focus: Focused field or button
        is_edit: True when editing the selected task, False when creating one
    """

    title: str = ""
    description: str = ""
    focus: EditFocus = EditFocus.TITLE
    is_edit: bool = False

    def focus_next(self) -> None:
        self.focus = self.focus.next()

    def focus_previous(self) -> None:
        self.focus = self.focus.previous()

    def insert_text(self, text: str) -> None:
        """Append text to the focused field (ignored on buttons)."""
        if self.focus == EditFocus.TITLE:
            self.title += text
        elif self.focus == EditFocus.DESCRIPTION:
            self.description += text

    def insert_newline(self) -> None:
        # Titles stay single-line
        if self.focus == EditFocus.DESCRIPTION:
            self.description += "\n"

    def delete_char(self) -> None:
        """Remove the last character of the focused field."""
        if self.focus == EditFocus.TITLE:
            self.title = self.title[:-1]
        elif self.focus == EditFocus.DESCRIPTION:
            self.description = self.description[:-1]
