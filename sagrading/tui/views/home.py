"""Home panel: static welcome text, also used by the Editing tab."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

WELCOME_HINT = (
    "< Press 'g' to access groups, 'a' to add random new groups "
    "and 'd' to delete the currently selected group. >"
)

MASCOT = ("    \\/", "|\\---/|", "| o_o |", " \\_^_/ ")


def build_home_text() -> Text:
    """Return the welcome message shown on the Home tab."""
    rule = "-" * len(WELCOME_HINT)
    text = Text(justify="center")
    text.append("\nWelcome\n\nto\n\n")
    text.append("SAGrading-CLI\n\n", style="bright_blue")
    text.append(f"{rule}\n{WELCOME_HINT}\n{rule}\n")
    text.append(MASCOT[0] + "\n")
    for line in MASCOT[1:]:
        text.append(line + "\n", style="bright_blue")
    return text


class HomePanel(Static):
    """Bordered panel holding the welcome text."""

    DEFAULT_CSS = """
    HomePanel {
        height: 1fr;
        border: solid $primary;
        content-align: center middle;
    }
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(build_home_text(), id=id)

    def on_mount(self) -> None:
        self.border_title = "Home"
