"""Tests for the event source in sagrading/tui/events.py."""

from __future__ import annotations

import time

import pytest

from sagrading.tui.events import EventSource, Input, KeyBuffer, Tick


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class ScriptedInput:
    """Polling primitive replaying a script of (seconds waited, key) steps.

    A step waiting None uses the whole timeout. The source is stopped once
    the script runs out.
    """

    def __init__(self, clock: FakeClock, steps: list[tuple[float | None, str | None]]):
        self.clock = clock
        self.steps = list(steps)
        self.timeouts: list[float] = []
        self.source: EventSource | None = None

    def __call__(self, timeout: float) -> str | None:
        self.timeouts.append(timeout)
        waited, key = self.steps.pop(0)
        self.clock.now += timeout if waited is None else min(waited, timeout)
        if not self.steps:
            self.source.stop()
        return key


def run_script(steps, tick_rate: float = 1.0):
    """Run an EventSource over ``steps`` and return (events, timeouts)."""
    clock = FakeClock()
    script = ScriptedInput(clock, steps)
    source = EventSource(script, tick_rate=tick_rate, clock=clock)
    script.source = source
    source.run()

    events = []
    while (event := source.get(timeout=0)) is not None:
        events.append(event)
    return events, script.timeouts


class TestEventSourceRun:
    """Deterministic tests of the producer loop."""

    def test_idle_produces_ticks(self):
        """Without input exactly one tick is produced per interval."""
        events, timeouts = run_script([(None, None)] * 3)
        assert events == [Tick(), Tick(), Tick()]
        assert timeouts == [1.0, 1.0, 1.0]

    def test_input_waits_only_for_remaining_slice(self):
        """Each poll is bounded by the time left until the next tick."""
        events, timeouts = run_script(
            [(0.25, "a"), (0.25, "b"), (0.25, "c"), (0.25, "d")]
        )
        assert events == [Input("a"), Input("b"), Input("c"), Input("d"), Tick()]
        assert timeouts == [1.0, 0.75, 0.5, 0.25]

    def test_input_burst_does_not_starve_ticks(self):
        """Keys arriving instantly still let a tick through every interval."""
        steps = [(0.5, "up")] * 6
        events, _ = run_script(steps)
        assert events == [
            Input("up"), Input("up"), Tick(),
            Input("up"), Input("up"), Tick(),
            Input("up"), Input("up"), Tick(),
        ]

    def test_order_preserved(self):
        events, _ = run_script([(0.25, "g"), (0.25, "down"), (None, None), (0.25, "q")])
        assert [e for e in events if isinstance(e, Input)] == [
            Input("g"), Input("down"), Input("q"),
        ]
        assert events.index(Tick()) == 2

    def test_poll_failure_is_fatal(self):
        """A failing input primitive ends the producer with its error."""

        def broken_poll(timeout: float) -> str | None:
            raise OSError("terminal closed")

        source = EventSource(broken_poll, tick_rate=0.1)
        with pytest.raises(OSError, match="terminal closed"):
            source.run()

    def test_rejects_non_positive_tick_rate(self):
        with pytest.raises(ValueError):
            EventSource(lambda timeout: None, tick_rate=0)


class TestKeyBuffer:
    def test_poll_returns_pressed_key(self):
        keys = KeyBuffer()
        keys.press("a")
        keys.press("b")
        assert keys.poll(0) == "a"
        assert keys.poll(0) == "b"

    def test_poll_times_out(self):
        keys = KeyBuffer()
        started = time.monotonic()
        assert keys.poll(0.05) is None
        assert time.monotonic() - started >= 0.04

    def test_negative_timeout_does_not_block(self):
        assert KeyBuffer().poll(-1.0) is None


class TestEventSourceThread:
    """Tests with a real producer thread."""

    def test_keys_and_ticks_delivered(self):
        keys = KeyBuffer()
        source = EventSource(keys.poll, tick_rate=0.05)
        thread = source.start()
        try:
            keys.press("g")
            keys.press("q")

            received = []
            deadline = time.monotonic() + 5.0
            while time.monotonic() < deadline:
                event = source.get(timeout=0.1)
                if event is not None:
                    received.append(event)
                if Input("q") in received and Tick() in received:
                    break
        finally:
            source.stop()
            thread.join(timeout=2.0)

        inputs = [e for e in received if isinstance(e, Input)]
        assert inputs[:2] == [Input("g"), Input("q")]
        assert Tick() in received
        assert not thread.is_alive()

    def test_get_times_out(self):
        source = EventSource(lambda timeout: None, tick_rate=1.0)
        assert source.get(timeout=0.01) is None
