"""Dining philosophers sharing a pool of forks counted by a semaphore.

Each philosopher runs on its own worker with a private watcher that
reports its death. The forks lie in the middle of the table: a
philosopher takes any two of them. A shared "death" semaphore wakes the
host, which then stops every philosopher.
"""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from typing import TextIO

from philosim.clock import Clock
from philosim.errors import EXIT_SUCCESS, ErrorKind, PhiloError
from philosim.parsing import SimulationConfig, parse_input
from philosim.simulation import GAME_ENDED, Philosopher
from philosim.status import PhiloState, StatusPrinter

_WATCH_INTERVAL_S = 0.001
_THINK_PAUSE_S = 0.0001
_POLL_INTERVAL_S = 0.0001
_ACQUIRE_TIMEOUT_S = 0.001


class SemaphoreSimulation:
    """Runs philosophers that draw two forks from a shared counted pool.

    The run ends as soon as one philosopher dies, or as soon as one
    philosopher has eaten ``nb_time_to_eat`` times, which prints
    ``Game Ended``.
    """

    def __init__(self, config: SimulationConfig, stream: TextIO | None = None) -> None:
        self.config = config
        self.clock = Clock()
        self.printer = StatusPrinter(self.clock, stream)
        self.philosophers = [
            Philosopher(philo_id) for philo_id in range(1, config.nb_of_philo + 1)
        ]
        self.died: int | None = None
        self._forks = threading.Semaphore(config.nb_of_philo)
        self._death = threading.Semaphore(0)
        self._killed = threading.Event()
        self._done = {philo.id: threading.Event() for philo in self.philosophers}
        self._died_lock = threading.Lock()
        self._threads: list[threading.Thread] = []
        self._started = False

    @property
    def is_end(self) -> bool:
        """True once every philosopher has been told to stop."""
        return self._killed.is_set()

    def run(self) -> None:
        """Start every philosopher, wait for the first to finish or die, stop all.

        With no philosophers there is nothing to wait for and the run
        returns at once.

        Raises:
            RuntimeError: if the simulation was already run.
            PhiloError: if a worker cannot be created.
        """
        if self._started:
            raise RuntimeError("simulation already started")
        self._started = True
        if not self.philosophers:
            return
        try:
            for philo in self.philosophers:
                self._start_thread(self._philo_process, philo)
                self._start_thread(self._watch, philo)
        except PhiloError:
            self._kill()
            self._join()
            raise
        self._death.acquire()
        self._kill()
        self._join()

    def _start_thread(self, target, *args) -> None:
        thread = threading.Thread(target=target, args=args, daemon=True)
        try:
            thread.start()
        except RuntimeError as exc:
            raise PhiloError(ErrorKind.THREAD_CREATION, str(exc)) from exc
        self._threads.append(thread)

    def _join(self) -> None:
        for thread in self._threads:
            thread.join()

    def _kill(self) -> None:
        self._killed.set()
        self.printer.stop()

    def _take_fork(self) -> bool:
        while not self._killed.is_set():
            if self._forks.acquire(timeout=_ACQUIRE_TIMEOUT_S):
                return True
        return False

    def _wait(self, duration_ms: int) -> bool:
        end = self.clock.now() + duration_ms
        while self.clock.now() < end:
            if self._killed.is_set():
                return False
            time.sleep(_POLL_INTERVAL_S)
        return not self._killed.is_set()

    def _eat(self, philo: Philosopher) -> bool:
        if not self._take_fork():
            return False
        if not self._take_fork():
            self._forks.release()
            return False
        try:
            philo.last_ate_at = self.clock.now()
            self.printer.print(PhiloState.TOOK_FORKS, philo.id)
            self.printer.print(PhiloState.EATING, philo.id)
            philo.nb_time_ate += 1
            return self._wait(self.config.time_to_eat)
        finally:
            self._forks.release()
            self._forks.release()

    def _philo_process(self, philo: Philosopher) -> None:
        try:
            while not self._killed.is_set():
                if philo.nb_time_ate == self.config.nb_time_to_eat:
                    self.printer.announce(GAME_ENDED)
                    break
                if not self._eat(philo):
                    break
                self.printer.print(PhiloState.SLEEPING, philo.id)
                if not self._wait(self.config.time_to_sleep):
                    break
                self.printer.print(PhiloState.THINKING, philo.id)
                time.sleep(_THINK_PAUSE_S)
        finally:
            self._done[philo.id].set()
            self._death.release()

    def _watch(self, philo: Philosopher) -> None:
        done = self._done[philo.id]
        while not self._killed.is_set() and not done.is_set():
            if self.clock.now() - philo.last_ate_at >= self.config.time_to_die:
                if self.printer.print(PhiloState.DIED, philo.id):
                    with self._died_lock:
                        if self.died is None:
                            self.died = philo.id
                self._death.release()
                return
            time.sleep(_WATCH_INTERVAL_S)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation on stdout, return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_input(args)
        SemaphoreSimulation(config).run()
    except PhiloError as exc:
        return exc.report()
    return EXIT_SUCCESS