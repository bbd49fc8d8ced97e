"""The dining table: philosophers, forks and the monitor that watches them."""

from __future__ import annotations

import enum
import sys
import threading
import time
from typing import TextIO

from philosophers.clock import now_ms, sleep_ms
from philosophers.parsing import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"

ACTIONS = frozenset({DIED, TAKEN_FORK, EATING, SLEEPING, THINKING})

_LOOP_PAUSE_SECONDS = 0.0001


class StopReason(enum.IntEnum):
    """Why the simulation stopped, if it has."""

    RUNNING = 0
    DIED = 1
    ALL_EATEN = 2


class Philosopher:
    """One philosopher seated between two forks."""

    def __init__(
        self,
        ident: int,
        table: Table,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.id = ident
        self.table = table
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.last_meal_time = now_ms()
        self.eat_count = 0

    def _forks_in_order(self) -> tuple[threading.Lock, threading.Lock]:
        if self.id % 2 == 0:
            return self.left_fork, self.right_fork
        return self.right_fork, self.left_fork

    def eat(self) -> None:
        """Take both forks, eat for ``time_to_eat`` ms and count the meal."""
        table = self.table
        first, second = self._forks_in_order()
        with first:
            table.report(self.id, TAKEN_FORK)
            with second:
                table.report(self.id, TAKEN_FORK)
                table.report(self.id, EATING)
                with table.meal_lock:
                    self.last_meal_time = now_ms()
                sleep_ms(table.settings.time_to_eat)
        with table.meal_lock:
            self.eat_count += 1

    def sleep(self) -> None:
        """Report sleeping and sleep for ``time_to_sleep`` ms."""
        self.table.report(self.id, SLEEPING)
        sleep_ms(self.table.settings.time_to_sleep)

    def think(self) -> None:
        """Report thinking."""
        self.table.report(self.id, THINKING)

    def has_eaten_enough(self) -> bool:
        """Return True once the required number of meals has been eaten."""
        must_eat = self.table.settings.must_eat_count
        with self.table.meal_lock:
            return must_eat is not None and self.eat_count >= must_eat

    def handle_alone(self) -> None:
        """A lone philosopher holds one fork until starving to death."""
        table = self.table
        with self.left_fork:
            table.report(self.id, TAKEN_FORK)
            sleep_ms(table.settings.time_to_die)
            table.report(self.id, DIED)
        table.set_stop(StopReason.DIED)

    def wait_turn(self) -> None:
        """Delay even-numbered philosophers briefly so neighbours start apart."""
        if self.id % 2 == 0:
            time.sleep(self.table.settings.num_philos / 1_000_000)

    def run(self) -> None:
        """The philosopher's life: eat, sleep, think until told to stop."""
        table = self.table
        if table.settings.num_philos == 1:
            self.handle_alone()
        self.wait_turn()
        while table.stop is not StopReason.DIED:
            time.sleep(_LOOP_PAUSE_SECONDS)
            self.eat()
            if self.has_eaten_enough():
                return
            self.sleep()
            self.think()


class Table:
    """Shared state of one simulation run."""

    def __init__(self, settings: Settings, output: TextIO | None = None) -> None:
        self.settings = settings
        self._output = output
        self.print_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.death_lock = threading.Lock()
        self._stop = StopReason.RUNNING
        self.start_time = now_ms()
        count = settings.num_philos
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                index + 1,
                self,
                self.forks[index],
                self.forks[(index + 1) % count],
            )
            for index in range(count)
        ]

    @property
    def stop(self) -> StopReason:
        """The current stop state."""
        with self.death_lock:
            return self._stop

    def set_stop(self, reason: StopReason) -> None:
        """Record why the simulation stops."""
        with self.death_lock:
            self._stop = reason

    def report(self, philosopher_id: int, action: str) -> None:
        """Print a timestamped action line unless the simulation has stopped."""
        with self.print_lock:
            if self.stop is not StopReason.RUNNING:
                return
            if action not in ACTIONS:
                return
            stream = self._output if self._output is not None else sys.stdout
            elapsed = now_ms() - self.start_time
            stream.write(f"{elapsed} {philosopher_id} {action}\n")
            stream.flush()

    def check_death(self) -> None:
        """Stop the run if any philosopher has gone too long without eating."""
        for philosopher in self.philosophers:
            with self.meal_lock:
                starving = (
                    now_ms() - philosopher.last_meal_time
                    >= self.settings.time_to_die
                )
            if starving:
                self.report(philosopher.id, DIED)
                self.set_stop(StopReason.DIED)
                return

    def check_all_eaten(self) -> None:
        """Stop the run once every philosopher has eaten enough."""
        if all(p.has_eaten_enough() for p in self.philosophers):
            self.set_stop(StopReason.ALL_EATEN)

    def monitor(self) -> None:
        """Watch the philosophers until someone dies or all have eaten."""
        while self.stop is StopReason.RUNNING:
            self.check_death()
            if self.stop is StopReason.DIED:
                return
            self.check_all_eaten()
            time.sleep(_LOOP_PAUSE_SECONDS)

    def run(self) -> StopReason:
        """Run the simulation to completion and return why it stopped."""
        self.start_time = now_ms()
        threads = [
            threading.Thread(target=p.run, name=f"philosopher-{p.id}")
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        for thread in threads:
            thread.join()
        watcher.join()
        return self.stop