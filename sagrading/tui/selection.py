"""
Selection state: active menu tab and highlighted group row.

The selection is not linked to the store transactionally. Callers must
revalidate it against the current store length after every store read or
mutation, since the store can shrink underneath a stale row index.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MenuItem(Enum):
    """Tabs of the dashboard menu."""

    HOME = "home"
    GROUPS = "groups"
    EDITING = "editing"

    @property
    def index(self) -> int:
        """Position of the tab in the menu bar."""
        return list(MenuItem).index(self)

    @property
    def title(self) -> str:
        return self.value.capitalize()


@dataclass
class SelectionState:
    """Active tab plus selected row (None when there is nothing to select)."""

    active_tab: MenuItem = MenuItem.HOME
    selected_row: int | None = 0

    def select_next(self, length: int) -> None:
        """Move the selection down one row, wrapping to the top."""
        if length <= 0:
            self.selected_row = None
            return
        if self.selected_row is None:
            return
        self.selected_row = (self.selected_row + 1) % length

    def select_previous(self, length: int) -> None:
        """Move the selection up one row, wrapping to the bottom."""
        if length <= 0:
            self.selected_row = None
            return
        if self.selected_row is None:
            return
        self.selected_row = (self.selected_row - 1 + length) % length

    def shift_after_delete(self, index: int) -> None:
        """Keep the selection on a valid row after removing ``index``.

        The row above the removed one is selected; removing row 0 keeps
        the selection at 0, now the new first record.
        """
        self.selected_row = index - 1 if index != 0 else 0

    def revalidate(self, length: int) -> None:
        """Bring the selection back into ``[0, length)``.

        An empty store clears the selection. A cleared selection is
        restored to the first row once the store has records again.
        """
        self.selected_row = self.clamped(length)

    def clamped(self, length: int) -> int | None:
        """Return the selected row clamped into range without mutating."""
        if length <= 0:
            return None
        if self.selected_row is None or self.selected_row < 0:
            return 0
        return min(self.selected_row, length - 1)
