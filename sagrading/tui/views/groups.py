"""
Groups panel: list of group names beside the selected group's detail.

The panel only draws what it is given. Selection and store access live in
the dashboard controller, so none of these widgets take focus or handle keys.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import DataTable, Static

from sagrading.tui.render_model import GroupsView

EMPTY_MESSAGE = "No groups yet. Press 'a' to add one."


class GroupListTable(DataTable, can_focus=False):
    """Single-column table of group names with a row cursor."""


class GroupDetailTable(DataTable, can_focus=False):
    """One-row table with the selected group's fields."""


class GroupsPanel(Horizontal):
    """Group list (left) and detail (right)."""

    DEFAULT_CSS = """
    GroupsPanel {
        height: 1fr;
    }

    GroupsPanel #group-list {
        width: 20%;
        border: solid $primary;
    }

    GroupsPanel #group-detail {
        width: 80%;
        border: solid $primary;
    }

    GroupsPanel #groups-empty {
        width: 100%;
        height: 1fr;
        border: solid $primary;
        content-align: center middle;
    }

    GroupsPanel DataTable > .datatable--cursor {
        background: $warning;
        color: $text;
        text-style: bold;
    }
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id)
        self._names: tuple[str, ...] | None = None
        self._ready = False
        self._pending = GroupsView()

    def compose(self) -> ComposeResult:
        yield GroupListTable(id="group-list", cursor_type="row", show_header=False)
        yield GroupDetailTable(id="group-detail", cursor_type="none")
        yield Static(EMPTY_MESSAGE, id="groups-empty")

    def on_mount(self) -> None:
        group_list = self.query_one("#group-list", GroupListTable)
        group_list.border_title = "Groups"
        group_list.add_column("Name", key="name")

        detail = self.query_one("#group-detail", GroupDetailTable)
        detail.border_title = "Detail"
        detail.add_column("Name", key="name")
        detail.add_column("Assignment", key="assignment")
        detail.add_column("Feedback", key="feedback")

        self.query_one("#groups-empty", Static).border_title = "Groups"
        self._ready = True
        self.show(self._pending)

    def show(self, view: GroupsView) -> None:
        """Draw ``view``, rebuilding the name list only when it changed."""
        if not self._ready:
            # Columns are added on mount
            self._pending = view
            return

        group_list = self.query_one("#group-list", GroupListTable)
        detail = self.query_one("#group-detail", GroupDetailTable)
        empty = self.query_one("#groups-empty", Static)

        group_list.display = not view.is_empty
        detail.display = not view.is_empty
        empty.display = view.is_empty

        if view.names != self._names:
            group_list.clear()
            for idx, name in enumerate(view.names):
                group_list.add_row(name, key=str(idx))
            self._names = view.names

        detail.clear()
        if view.detail is None or view.selected_index is None:
            return

        group_list.move_cursor(row=view.selected_index)
        detail.add_row(
            view.detail.name,
            str(view.detail.assignment),
            view.detail.feedback_text,
        )
