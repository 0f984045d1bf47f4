"""Dining philosophers with one thread per philosopher and a monitor thread."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from philosim.clock import Clock
from philosim.errors import EXIT_SUCCESS, ErrorKind, PhiloError
from philosim.parsing import SimulationConfig, parse_input
from philosim.status import PhiloState, StatusPrinter

_MONITOR_INTERVAL_S = 0.0002
_THINK_PAUSE_S = 0.0001
_GROUP_STAGGER_S = 0.0001

GAME_ENDED = "Game Ended\n"


@dataclass
class Philosopher:
    """One diner: its 1-based id, meals eaten and time of its last meal."""

    id: int
    nb_time_ate: int = 0
    last_ate_at: int = 0


class Simulation:
    """Runs philosophers sharing one fork between each pair of neighbours.

    The run ends when a philosopher goes ``time_to_die`` milliseconds
    without starting a meal, or when every philosopher has eaten
    ``nb_time_to_eat`` times, which prints ``Game Ended``.
    """

    def __init__(self, config: SimulationConfig, stream: TextIO | None = None) -> None:
        self.config = config
        self.clock = Clock()
        self.printer = StatusPrinter(self.clock, stream)
        self.philosophers = [
            Philosopher(philo_id) for philo_id in range(1, config.nb_of_philo + 1)
        ]
        self.died: int | None = None
        self._forks = [threading.Lock() for _ in self.philosophers]
        self._threads: list[threading.Thread] = []
        self._monitor: threading.Thread | None = None

    @property
    def is_end(self) -> bool:
        """True once the simulation has ended."""
        return self.printer.is_stopped()

    def start(self) -> None:
        """Start the even-numbered philosophers, then the odd ones, then the monitor.

        Raises:
            RuntimeError: if the simulation was already started.
            PhiloError: if a thread cannot be created.
        """
        if self._monitor is not None:
            raise RuntimeError("simulation already started")
        self._spawn(self.philosophers[1::2])
        time.sleep(_GROUP_STAGGER_S)
        self._spawn(self.philosophers[0::2])
        self._monitor = self._start_thread(self._monitor_routine)

    def join(self) -> None:
        """Wait for the monitor and every philosopher to finish."""
        if self._monitor is not None:
            self._monitor.join()
        for thread in self._threads:
            thread.join()

    def run(self) -> None:
        """Start the simulation and wait for it to end."""
        self.start()
        self.join()

    def _start_thread(self, target, *args) -> threading.Thread:
        thread = threading.Thread(target=target, args=args, daemon=True)
        try:
            thread.start()
        except RuntimeError as exc:
            self.printer.stop()
            raise PhiloError(ErrorKind.THREAD_CREATION, str(exc)) from exc
        return thread

    def _spawn(self, group: list[Philosopher]) -> None:
        for philo in group:
            self._threads.append(self._start_thread(self._philo_routine, philo))

    def _fork_order(self, philo: Philosopher) -> tuple[threading.Lock, threading.Lock]:
        left = self._forks[philo.id - 1]
        right = self._forks[philo.id % self.config.nb_of_philo]
        return (right, left) if philo.id % 2 == 0 else (left, right)

    def _philo_routine(self, philo: Philosopher) -> None:
        if self.config.nb_of_philo == 1:
            # A lone philosopher holds a single fork and can only wait to die.
            self.printer.print(PhiloState.TOOK_LEFT_FORK, philo.id)
            while not self.is_end:
                time.sleep(_THINK_PAUSE_S)
            return
        while not self.is_end:
            self._eat(philo)
            if self.is_end:
                break
            self.printer.print(PhiloState.SLEEPING, philo.id)
            self.clock.sleep(self.config.time_to_sleep)
            if self.is_end:
                break
            self.printer.print(PhiloState.THINKING, philo.id)
            time.sleep(_THINK_PAUSE_S)

    def _eat(self, philo: Philosopher) -> None:
        first, second = self._fork_order(philo)
        with first, second:
            philo.last_ate_at = self.clock.now()
            if self.is_end:
                return
            self.printer.print(PhiloState.TOOK_FORKS, philo.id)
            self.printer.print(PhiloState.EATING, philo.id)
            philo.nb_time_ate += 1
            self.clock.sleep(self.config.time_to_eat)

    def _all_ate(self) -> bool:
        return all(
            philo.nb_time_ate >= self.config.nb_time_to_eat
            for philo in self.philosophers
        )

    def _all_alive(self) -> bool:
        for philo in self.philosophers:
            starving = self.clock.now() - philo.last_ate_at >= self.config.time_to_die
            if self.is_end or starving:
                if self.printer.print(PhiloState.DIED, philo.id):
                    self.died = philo.id
                self.printer.stop()
                return False
        return True

    def _monitor_routine(self) -> None:
        while self._all_alive():
            if self._all_ate():
                self.printer.announce(GAME_ENDED)
                return
            time.sleep(_MONITOR_INTERVAL_S)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation on stdout, return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_input(args)
        Simulation(config).run()
    except PhiloError as exc:
        return exc.report()
    return EXIT_SUCCESS