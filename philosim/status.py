"""Philosopher states and the thread-safe printer that reports them."""

from __future__ import annotations

import enum
import sys
import threading
from typing import TextIO

from philosim.clock import Clock


class PhiloState(enum.Enum):
    """What a philosopher can be reported as doing."""

    SLEEPING = enum.auto()
    THINKING = enum.auto()
    EATING = enum.auto()
    DIED = enum.auto()
    TOOK_LEFT_FORK = enum.auto()
    TOOK_RIGHT_FORK = enum.auto()
    TOOK_FORKS = enum.auto()


_SUFFIXES = {
    PhiloState.SLEEPING: " is sleeping\n",
    PhiloState.THINKING: " is thinking\n",
    PhiloState.EATING: " is eating\n",
    PhiloState.DIED: " is dead\n",
    PhiloState.TOOK_LEFT_FORK: " took left fork\n",
    PhiloState.TOOK_RIGHT_FORK: " took right fork\n",
}


def _line(suffix: str, philo_id: int, timestamp: int) -> str:
    return f"{timestamp} ms philosopher nb {philo_id}{suffix}"


def format_status(state: PhiloState, philo_id: int, timestamp: int) -> str:
    """Return the status text for *state*, one line per event.

    ``TOOK_FORKS`` expands to a left-fork line followed by a right-fork line.
    """
    if state is PhiloState.TOOK_FORKS:
        return _line(
            _SUFFIXES[PhiloState.TOOK_LEFT_FORK], philo_id, timestamp
        ) + _line(_SUFFIXES[PhiloState.TOOK_RIGHT_FORK], philo_id, timestamp)
    return _line(_SUFFIXES[state], philo_id, timestamp)


class StatusPrinter:
    """Serialises status lines to a stream until the simulation is stopped.

    Once stopped, nothing more is written. Printing a death stops the
    printer in the same step, so no line can follow it.
    """

    def __init__(self, clock: Clock, stream: TextIO | None = None) -> None:
        self._clock = clock
        self._stream = sys.stdout if stream is None else stream
        self._lock = threading.Lock()
        self._stopped = False

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def print(self, state: PhiloState, philo_id: int) -> bool:
        """Write the status line(s) for *state*; return False if stopped."""
        with self._lock:
            if self._stopped:
                return False
            self._write(format_status(state, philo_id, self._clock.now()))
            if state is PhiloState.DIED:
                self._stopped = True
            return True

    def announce(self, message: str) -> bool:
        """Write *message* verbatim and stop; return False if already stopped."""
        with self._lock:
            if self._stopped:
                return False
            self._write(message)
            self._stopped = True
            return True

    def stop(self) -> None:
        """Stop the printer; later calls write nothing."""
        with self._lock:
            self._stopped = True

    def is_stopped(self) -> bool:
        """True once the printer has been stopped."""
        return self._stopped