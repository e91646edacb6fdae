"""
Menu bar widget showing the dashboard tabs and commands.

The first letter of each entry is the key that triggers it. The active tab
is highlighted.
"""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from sagrading.tui.selection import MenuItem

COMMAND_TITLES: tuple[str, ...] = ("Add", "Delete", "Quit")


class MenuBar(Static):
    """One-line menu: tabs followed by commands, separated by '|'."""

    DEFAULT_CSS = """
    MenuBar {
        height: 3;
        border: solid $primary;
        padding: 0 1;
    }
    """

    active: reactive[MenuItem] = reactive(MenuItem.HOME)

    def on_mount(self) -> None:
        self.border_title = "Menu"

    def render(self) -> Text:
        titles = [item.title for item in MenuItem] + list(COMMAND_TITLES)
        text = Text()
        for i, title in enumerate(titles):
            if i:
                text.append(" | ")
            style = "bold yellow" if i == self.active.index else "white"
            text.append(title[0], style=f"{style} underline")
            text.append(title[1:], style=style)
        return text
