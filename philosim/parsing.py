"""Command-line parsing into a simulation configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philosim.errors import UsageError
from philosim.numbers import ULONG_MAX, atoul, exceeds_ulong_max, is_num


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one dining-philosophers run; times are in milliseconds.

    ``nb_time_to_eat`` is ULONG_MAX when no meal limit was given.
    """

    nb_of_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    nb_time_to_eat: int = ULONG_MAX

    @property
    def has_meal_limit(self) -> bool:
        """True if a number of meals per philosopher was requested."""
        return self.nb_time_to_eat != ULONG_MAX


def parse_count(text: str | None) -> int:
    """Parse one unsigned decimal argument.

    Raises:
        UsageError: if *text* is not all digits or is above ULONG_MAX.
    """
    if not is_num(text) or exceeds_ulong_max(text):
        raise UsageError(f"invalid number: {text!r}")
    return atoul(text)


def parse_input(argv: Sequence[str]) -> SimulationConfig:
    """Build a configuration from the arguments that follow the program name.

    Expects ``number_of_philosophers time_to_die time_to_eat time_to_sleep``
    and an optional ``number_of_times_each_philosopher_must_eat``.

    Raises:
        UsageError: on a wrong number of arguments or an invalid value.
    """
    args = list(argv)
    if len(args) not in (4, 5):
        raise UsageError(f"expected 4 or 5 arguments, got {len(args)}")
    nb_of_philo, time_to_die, time_to_eat, time_to_sleep = (
        parse_count(arg) for arg in args[:4]
    )
    nb_time_to_eat = parse_count(args[4]) if len(args) == 5 else ULONG_MAX
    return SimulationConfig(
        nb_of_philo=nb_of_philo,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        nb_time_to_eat=nb_time_to_eat,
    )