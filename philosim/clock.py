"""Millisecond clock measured from the start of a simulation."""

from __future__ import annotations

import time

_POLL_INTERVAL_S = 0.0001


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Clock:
    """Elapsed-time clock in whole milliseconds, starting at construction."""

    def __init__(self) -> None:
        self._start_ms = _monotonic_ms()

    def now(self) -> int:
        """Return the milliseconds elapsed since this clock was created."""
        return _monotonic_ms() - self._start_ms

    def sleep(self, duration_ms: int) -> None:
        """Wait until at least *duration_ms* milliseconds have passed.

        Polls in short steps rather than sleeping once, so the wake-up is
        close to the deadline.

        Raises:
            ValueError: if *duration_ms* is negative.
        """
        if duration_ms < 0:
            raise ValueError(f"negative duration: {duration_ms}")
        end = self.now() + duration_ms
        while self.now() < end:
            time.sleep(_POLL_INTERVAL_S)