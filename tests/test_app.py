"""Headless tests for DashboardApp in sagrading/tui/app.py."""

from __future__ import annotations

import asyncio
import time

from textual.widgets import ContentSwitcher

from conftest import FixedGenerator
from sagrading.config import Settings
from sagrading.tui.app import DashboardApp
from sagrading.tui.selection import MenuItem
from sagrading.tui.views.groups import GroupDetailTable, GroupListTable
from sagrading.tui.widgets import MenuBar


async def wait_for(pilot, predicate, timeout: float = 5.0) -> None:
    """Pause the pilot until ``predicate()`` holds."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached in time")
        await pilot.pause(0.05)


def make_app(store) -> DashboardApp:
    settings = Settings(db_path=store.path, tick_rate_ms=50)
    app = DashboardApp(store, settings, records=store.load())
    app.dashboard._generator = FixedGenerator()
    return app


def run_scenario(app: DashboardApp, scenario) -> None:
    async def _run() -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await scenario(pilot)

    asyncio.run(_run())


class TestDashboardApp:
    """End-to-end tests through the event source and controller loop."""

    def test_starts_on_home(self, store):
        app = make_app(store)

        async def scenario(pilot):
            assert app.query_one(ContentSwitcher).current == "home"
            assert app.query_one(MenuBar).active is MenuItem.HOME

        run_scenario(app, scenario)

    def test_browse_groups(self, store):
        app = make_app(store)

        async def scenario(pilot):
            await pilot.press("g")
            await wait_for(pilot, lambda: app.query_one(ContentSwitcher).current == "groups")
            group_list = app.query_one(GroupListTable)
            assert group_list.row_count == 5

            await pilot.press("down", "down")
            await wait_for(pilot, lambda: group_list.cursor_row == 2)
            assert app.dashboard.selection.selected_row == 2

            detail = app.query_one(GroupDetailTable)
            assert detail.get_row_at(0) == ["Group 2", "2", "Feedback 2"]

        run_scenario(app, scenario)

    def test_add_and_delete(self, store):
        app = make_app(store)

        async def scenario(pilot):
            await pilot.press("g", "a")
            group_list = app.query_one(GroupListTable)
            await wait_for(pilot, lambda: group_list.row_count == 6)

            await pilot.press("d")
            await wait_for(pilot, lambda: group_list.row_count == 5)

        run_scenario(app, scenario)
        assert [g.name for g in store.load()][0] == "Group 1"

    def test_quit_exits_cleanly(self, store):
        app = make_app(store)

        async def scenario(pilot):
            await pilot.press("q")
            await wait_for(pilot, lambda: app.return_code is not None)

        run_scenario(app, scenario)
        assert app.return_code == 0
        assert app.source.stopped

    def test_store_error_keeps_running(self, store, store_path):
        app = make_app(store)

        async def scenario(pilot):
            await pilot.press("g")
            await wait_for(pilot, lambda: app.query_one(ContentSwitcher).current == "groups")
            store_path.write_text("not valid json")

            await pilot.press("a")
            await pilot.press("h")
            await wait_for(pilot, lambda: app.query_one(ContentSwitcher).current == "home")
            assert app.return_code is None

        run_scenario(app, scenario)
