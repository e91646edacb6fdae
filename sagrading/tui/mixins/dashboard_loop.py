"""
Dashboard Loop Mixin for running the event loop off the UI thread.

Provides the two background tasks of a dashboard session:
- The event source, producing Input and Tick events
- The controller loop, consuming one event at a time, applying it and
  handing the next frame to the UI thread

Store I/O therefore never blocks the UI thread, and all store and selection
mutations happen on the single controller worker.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import work
from textual.worker import get_current_worker

if TYPE_CHECKING:
    from sagrading.tui.controller import Dashboard
    from sagrading.tui.events import EventSource
    from sagrading.tui.render_model import Frame

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOOP_FAILED = 1


class DashboardLoopMixin:
    """Mixin running the dashboard controller loop in a thread worker.

    The host app provides ``source``, ``dashboard`` and ``draw_frame(frame)``.

    Usage:
        class MyApp(DashboardLoopMixin, App):
            def on_mount(self):
                self._start_dashboard_loop()
    """

    source: EventSource
    dashboard: Dashboard

    # Seconds to wait for an event before re-checking for cancellation
    EVENT_WAIT_TIMEOUT: float = 0.5

    def draw_frame(self, frame: Frame) -> None:
        raise NotImplementedError

    def _start_dashboard_loop(self) -> None:
        """Start the event source and the controller loop."""
        self.run_worker(
            self.source.run,
            name="event-source",
            group="dashboard",
            thread=True,
        )
        self._run_dashboard_loop()

    @work(thread=True, exclusive=True, group="dashboard-loop", name="dashboard-loop")
    def _run_dashboard_loop(self) -> None:
        """Background worker: next event, mutate, render, until quit."""
        worker = get_current_worker()
        return_code = EXIT_LOOP_FAILED
        shutting_down = False

        try:
            while not worker.is_cancelled:
                event = self.source.get(timeout=self.EVENT_WAIT_TIMEOUT)
                if self.source.stopped:
                    # The app is already closing
                    shutting_down = True
                    break
                if event is None:
                    continue

                if not self.dashboard.handle(event):
                    return_code = EXIT_OK
                    break

                self.call_from_thread(self.draw_frame, self.dashboard.render_model())
        except Exception:
            logger.exception("Dashboard loop failed")
            raise
        finally:
            # Leave the terminal through App.exit on every path
            self.source.stop()
            if not (worker.is_cancelled or shutting_down):
                self.call_from_thread(self.exit, return_code=return_code)
