"""
Event source for the dashboard loop.

Merges keyboard input and a fixed-interval tick into one ordered channel.
The producer waits for input only up to the time left before the next tick,
so a burst of key presses can never starve the tick.

Usage:
    keys = KeyBuffer()
    source = EventSource(keys.poll, tick_rate=0.2)
    source.start()
    keys.press("q")
    event = source.get()  # Input(key='q') or Tick()
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Union

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE = 0.2


@dataclass(frozen=True)
class Input:
    """A key press, named the way Textual names keys ("q", "up", "down")."""

    key: str


@dataclass(frozen=True)
class Tick:
    """Fixed-interval timer event. Only forces a redraw."""


Event = Union[Input, Tick]


class KeyBuffer:
    """Thread-safe buffer of pressed keys.

    The UI thread pushes keys with press(); the event source drains them
    with poll(), which blocks for at most ``timeout`` seconds.
    """

    def __init__(self) -> None:
        self._keys: queue.Queue[str] = queue.Queue()

    def press(self, key: str) -> None:
        """Queue a key press."""
        self._keys.put(key)

    def poll(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for the next key.

        Returns:
            The key name, or None if no key arrived in time.
        """
        try:
            return self._keys.get(timeout=max(timeout, 0.0))
        except queue.Empty:
            return None


class EventSource:
    """Background producer of Input and Tick events.

    Args:
        poll_key: Input polling primitive. Called with the number of seconds
            it may block; returns a key name or None.
        tick_rate: Seconds between two Tick events.
        clock: Monotonic clock, replaceable in tests.
    """

    def __init__(
        self,
        poll_key: Callable[[float], str | None],
        tick_rate: float = DEFAULT_TICK_RATE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive (got {tick_rate})")
        self._poll_key = poll_key
        self._tick_rate = tick_rate
        self._clock = clock
        self._channel: queue.Queue[Event] = queue.Queue()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def tick_rate(self) -> float:
        """Return the tick interval in seconds."""
        return self._tick_rate

    def run(self) -> None:
        """Produce events until stop() is called.

        Raises:
            Exception: Whatever the polling primitive raised. The producer
                does not restart itself.
        """
        logger.debug("Event source started (tick rate %.3fs)", self._tick_rate)
        last_tick = self._clock()

        while not self._stopped.is_set():
            timeout = max(0.0, self._tick_rate - (self._clock() - last_tick))

            try:
                key = self._poll_key(timeout)
            except Exception:
                logger.exception("Input polling failed, stopping event source")
                raise

            if key is not None:
                self._channel.put(Input(key))

            if self._clock() - last_tick >= self._tick_rate:
                self._channel.put(Tick())
                last_tick = self._clock()

        logger.debug("Event source stopped")

    def start(self) -> threading.Thread:
        """Run the producer loop on a daemon thread."""
        self._thread = threading.Thread(
            target=self.run, name="event-source", daemon=True
        )
        self._thread.start()
        return self._thread

    def stop(self) -> None:
        """Ask the producer loop to finish after its current poll."""
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        """Return True once stop() has been called."""
        return self._stopped.is_set()

    def get(self, timeout: float | None = None) -> Event | None:
        """Receive the next event in production order.

        Args:
            timeout: Seconds to wait. Blocks indefinitely if None.

        Returns:
            The next event, or None if none arrived within ``timeout``.
        """
        try:
            return self._channel.get(timeout=timeout)
        except queue.Empty:
            return None
