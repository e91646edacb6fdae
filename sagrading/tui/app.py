"""
Main Textual application for the SAGrading dashboard.

Browse the graded groups stored in a JSON file, add placeholder groups and
delete the selected one, all from the keyboard.

Keys:
    q       Quit
    h       Home tab
    g       Groups tab
    e       Editing tab
    a       Add a generated group
    d       Delete the selected group
    up/down Move the selection

Usage:
    python -m sagrading.tui.app --db data/db.json
"""

import logging
import sys

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import ContentSwitcher, Static

from sagrading.config import Settings, parse_settings
from sagrading.data_formats import (
    Group,
    JSONRecordStore,
    ParseError,
    ReadError,
    RecordStore,
    make_generator,
)
from sagrading.logging_config import setup_logging
from sagrading.tui.controller import Dashboard
from sagrading.tui.events import EventSource, KeyBuffer
from sagrading.tui.mixins import DashboardLoopMixin
from sagrading.tui.render_model import Frame, GroupsView
from sagrading.tui.views import GroupsPanel, HomePanel
from sagrading.tui.widgets import MenuBar

logger = logging.getLogger(__name__)

COPYRIGHT = "SAGrading - CLI 2021"

EXIT_READ_ERROR = 1
EXIT_PARSE_ERROR = 2


class DashboardApp(DashboardLoopMixin, App):
    """A Textual app for browsing and editing graded groups."""

    TITLE = "SAGrading"

    CSS = """
    Screen {
        background: $surface;
        padding: 1 2;
    }

    ContentSwitcher {
        height: 1fr;
    }

    #copyright {
        dock: bottom;
        height: 3;
        border: solid $primary;
        color: $accent;
        text-align: center;
    }
    """

    # Every command key is forwarded to the event source; the controller
    # loop decides what it means.
    BINDINGS = [
        Binding("q", "send_key('q')", "Quit", priority=True),
        Binding("h", "send_key('h')", "Home", priority=True),
        Binding("g", "send_key('g')", "Groups", priority=True),
        Binding("e", "send_key('e')", "Editing", priority=True),
        Binding("a", "send_key('a')", "Add", priority=True),
        Binding("d", "send_key('d')", "Delete", priority=True),
        Binding("up", "send_key('up')", "Up", show=False, priority=True),
        Binding("down", "send_key('down')", "Down", show=False, priority=True),
    ]

    def __init__(
        self,
        store: RecordStore,
        settings: Settings | None = None,
        records: list[Group] | None = None,
    ):
        """Initialize the app with a loaded store.

        Args:
            store: The record store to browse.
            settings: Session settings. Defaults are used if None.
            records: Records from the initial load.
        """
        super().__init__()
        self._settings = settings or Settings(db_path=store.path)
        self.keys = KeyBuffer()
        self.source = EventSource(self.keys.poll, tick_rate=self._settings.tick_rate)
        self.dashboard = Dashboard(
            store,
            make_generator(footnote=self._settings.footnote),
            records=records,
        )

    def compose(self) -> ComposeResult:
        """Compose the menu, the tab content and the copyright line."""
        yield MenuBar()
        with ContentSwitcher(initial="home"):
            yield HomePanel(id="home")
            yield GroupsPanel(id="groups")
        yield Static(COPYRIGHT, id="copyright")

    def on_mount(self) -> None:
        """Draw the first frame and start the event loop."""
        self.sub_title = self.dashboard.store.path
        self.query_one("#copyright", Static).border_title = "Copyright"
        self.draw_frame(self.dashboard.render_model())
        self._start_dashboard_loop()

    def on_unmount(self) -> None:
        """Stop producing events once the app is closing."""
        self.source.stop()

    def action_send_key(self, key: str) -> None:
        """Hand a key press to the event source."""
        self.keys.press(key)

    def draw_frame(self, frame: Frame) -> None:
        """Render a frame produced by the dashboard controller."""
        self.query_one(MenuBar).active = frame.tab

        switcher = self.query_one(ContentSwitcher)
        if isinstance(frame.body, GroupsView):
            switcher.current = "groups"
            self.query_one(GroupsPanel).show(frame.body)
        else:
            switcher.current = "home"
            self.query_one(HomePanel).border_title = frame.tab.title

        if frame.notice:
            self.notify(frame.notice, title="Store error", severity="error")


def main() -> None:
    """Parse arguments, load the store and run the application."""
    settings = parse_settings()
    setup_logging(settings.logging_level, settings.log_file)

    store = JSONRecordStore(settings.db_path)

    # A broken store must never reach the interactive loop
    try:
        if settings.init:
            store.initialize()
        records = store.load()
    except ReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_READ_ERROR)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_PARSE_ERROR)

    logger.info("Loaded %d groups from %s", len(records), store.path)

    app = DashboardApp(store, settings, records=records)
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
