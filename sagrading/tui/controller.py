"""
Dashboard controller.

Consumes events one at a time, applies them to the record store and the
selection state, and builds the render model for the next frame. All store
and selection mutations happen on the single thread that calls handle(), so
no locking is needed.

Key table:
    q       stop the loop
    h/g/e   switch to the Home / Groups / Editing tab
    a       append a generated group
    d       delete the selected group (Groups tab only)
    up/down move the selection with wraparound (Groups tab only)
"""

from __future__ import annotations

import logging
from typing import Callable

from sagrading.data_formats import Group, RecordStore, StoreError
from sagrading.tui.events import Event, Input, Tick
from sagrading.tui.render_model import Frame, GroupDetail, GroupsView, HomeView
from sagrading.tui.selection import MenuItem, SelectionState

logger = logging.getLogger(__name__)

QUIT_KEY = "q"

TAB_KEYS: dict[str, MenuItem] = {
    "h": MenuItem.HOME,
    "g": MenuItem.GROUPS,
    "e": MenuItem.EDITING,
}


class Dashboard:
    """State machine behind the dashboard.

    Args:
        store: The record store, read fresh for every operation.
        generator: Produces the record appended by the add command.
        selection: Initial selection. Defaults to the Home tab, row 0.
        records: Records from the initial load, used to validate the
            initial selection and as the first render snapshot.
    """

    def __init__(
        self,
        store: RecordStore,
        generator: Callable[[], Group],
        selection: SelectionState | None = None,
        records: list[Group] | None = None,
    ) -> None:
        self._store = store
        self._generator = generator
        self.selection = selection or SelectionState()
        self._snapshot: list[Group] = list(records or [])
        self._notice: str | None = None
        self._render_error: str | None = None

        if records is not None:
            self.selection.revalidate(len(records))

        self._commands: dict[str, Callable[[], None]] = {
            "a": self._add_group,
            "d": self._delete_selected,
            "up": self._select_previous,
            "down": self._select_next,
        }

    @property
    def store(self) -> RecordStore:
        return self._store

    def handle(self, event: Event) -> bool:
        """Apply one event.

        Store failures raised by a command abandon that command, leave the
        selection as it was and are reported through the next frame's
        notice.

        Returns:
            False when the event asks to quit, True otherwise.
        """
        if isinstance(event, Tick):
            return True
        if not isinstance(event, Input):
            raise TypeError(f"unexpected event {event!r}")

        key = event.key
        if key == QUIT_KEY:
            logger.info("Quit requested")
            return False

        if key in TAB_KEYS:
            self.selection.active_tab = TAB_KEYS[key]
            return True

        command = self._commands.get(key)
        if command is None:
            return True

        try:
            command()
        except StoreError as e:
            logger.warning("Command %r abandoned: %s", key, e)
            self._notice = str(e)
        return True

    def _load_length(self) -> int:
        records = self._store.load()
        self._snapshot = records
        return len(records)

    def _add_group(self) -> None:
        records = self._store.append(self._generator)
        self._snapshot = records
        logger.info("Added %s (%d groups)", records[-1].name, len(records))
        self.selection.revalidate(len(records))

    def _delete_selected(self) -> None:
        if self.selection.active_tab is not MenuItem.GROUPS:
            return
        index = self.selection.selected_row
        if index is None:
            return

        try:
            removed = self._store.remove_at(index)
        except IndexError:
            # The store shrank behind the selection
            logger.error("Selected row %d is out of range, clamping selection", index)
            self.selection.revalidate(self._load_length())
            return

        if not removed:
            logger.info("Refusing to delete the last remaining group")
            return

        logger.info("Deleted group at row %d", index)
        self.selection.shift_after_delete(index)
        self.selection.revalidate(self._load_length())

    def _revalidated_length(self) -> int | None:
        """Load the store length and revalidate the selection against it.

        Returns None when the selection was only just restored from None,
        in which case the restored first row is the move's result.
        """
        had_selection = self.selection.selected_row is not None
        length = self._load_length()
        self.selection.revalidate(length)
        if not had_selection:
            return None
        return length

    def _select_next(self) -> None:
        if self.selection.active_tab is not MenuItem.GROUPS:
            return
        length = self._revalidated_length()
        if length is not None:
            self.selection.select_next(length)

    def _select_previous(self) -> None:
        if self.selection.active_tab is not MenuItem.GROUPS:
            return
        length = self._revalidated_length()
        if length is not None:
            self.selection.select_previous(length)

    def take_notice(self) -> str | None:
        """Return and clear the pending error notice."""
        notice, self._notice = self._notice, None
        return notice

    def render_model(self) -> Frame:
        """Build the frame for the current state.

        Reads the store for the Groups tab but never changes the store or
        the selection. If the read fails, the last loaded records are shown
        and the error is reported once.
        """
        tab = self.selection.active_tab
        notice = self.take_notice()

        if tab is not MenuItem.GROUPS:
            return Frame(tab=tab, body=HomeView(), notice=notice)

        try:
            records = self._store.load()
            self._snapshot = records
            self._render_error = None
        except StoreError as e:
            records = self._snapshot
            message = str(e)
            if message != self._render_error:
                logger.warning("Showing last loaded groups: %s", message)
                self._render_error = message
                notice = notice or message

        return Frame(tab=tab, body=self._groups_view(records), notice=notice)

    def _groups_view(self, records: list[Group]) -> GroupsView:
        index = self.selection.clamped(len(records))
        if index is None:
            return GroupsView()
        return GroupsView(
            names=tuple(group.name for group in records),
            selected_index=index,
            detail=GroupDetail.from_group(records[index]),
        )
