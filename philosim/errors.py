"""Error kinds, their user-facing messages, and the exceptions that carry them."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ErrorKind(enum.Enum):
    """Kinds of failure the simulators can report."""

    THREAD_CREATION = enum.auto()
    EMPTY_LIST = enum.auto()
    EMPTY_ELEM = enum.auto()
    INVALID_NB_ARGS = enum.auto()
    PROMPT_USER_INPUT = enum.auto()
    SEMAPHORE_CREATION = enum.auto()


_MESSAGES = {
    ErrorKind.THREAD_CREATION: "Error! Pthread_create failed\n",
    ErrorKind.SEMAPHORE_CREATION: "Error! Sem_open failed\n",
    ErrorKind.EMPTY_LIST: "Error! Empty list\n",
    ErrorKind.EMPTY_ELEM: "Error! Pushing NULL Elem to list\n",
    ErrorKind.INVALID_NB_ARGS: "Error! Invalid number of arguments\n",
    ErrorKind.PROMPT_USER_INPUT: (
        "The program should take the following arguments:\n\n"
        "number_of_philosophers time_to_die time_to_eat time_to_sleep "
        "[number_of_times_each_philosopher_must_eat]\n"
    ),
}


def error_message(kind: ErrorKind) -> str:
    """Return the message printed for *kind*, ending with a newline."""
    return _MESSAGES[kind]


def report(kind: ErrorKind, stream: TextIO | None = None) -> int:
    """Write the message for *kind* to *stream* (stderr by default).

    Returns the failure exit status, so callers can ``return report(...)``.
    """
    target = sys.stderr if stream is None else stream
    target.write(error_message(kind))
    target.flush()
    return EXIT_FAILURE


class PhiloError(Exception):
    """A failure of the simulation, tagged with its :class:`ErrorKind`."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        text = error_message(kind).rstrip("\n")
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)

    def report(self, stream: TextIO | None = None) -> int:
        """Write this error's message to *stream* and return the failure status."""
        return report(self.kind, stream)


class UsageError(PhiloError):
    """The command-line arguments are missing or invalid."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(ErrorKind.PROMPT_USER_INPUT, detail)