"""Dining philosophers with one thread per philosopher and one lock per fork."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .config import Settings
from .utils import Message, format_message

_TICK = 0.00005


@dataclass
class Philosopher:
    """State of one seat at the table; forks are indices into the fork list."""

    number: int
    left_fork: int
    right_fork: int
    meals_left: Optional[int]
    alive: bool = True
    last_meal: int = 0


def _seat(settings: Settings) -> List[Philosopher]:
    count = settings.philosophers
    return [
        Philosopher(
            number=index + 1,
            left_fork=count - 1 if index == 0 else index - 1,
            right_fork=index,
            meals_left=settings.must_eat,
        )
        for index in range(count)
    ]


class Table:
    """Runs the simulation where forks are shared locks between neighbours."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.philosophers = _seat(settings)
        self.global_time = 0
        self.someone_died = False
        self._forks = [threading.Lock() for _ in range(settings.philosophers)]
        self._output_lock = threading.Lock()
        self._last_meals = [0] * (settings.philosophers + 1)
        self._start = 0.0

    def run(self) -> bool:
        """Run until everyone has eaten enough or someone dies.

        Returns True when every philosopher was satisfied.
        """
        self._start = time.monotonic()
        target = self._single if self.settings.philosophers == 1 else self._dine
        threads = [
            threading.Thread(target=target, args=(philosopher,), daemon=True)
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        if not self.someone_died:
            with self._output_lock:
                self.out.write(f"{self.global_time} everyone is satisfied\n")
        return not self.someone_died

    def _update_time(self) -> None:
        self.global_time = int((time.monotonic() - self._start) * 1000)

    def _emit(self, number: int, message: Message) -> None:
        with self._output_lock:
            self.out.write(format_message(self.global_time, number, message))

    def _starving(self, last_meal: int) -> bool:
        return self.global_time - last_meal > self.settings.time_to_die

    def _single(self, philosopher: Philosopher) -> None:
        self._emit(philosopher.number, Message.TAKEN_SINGLE_FORK)
        time.sleep(self.settings.time_to_die / 1000)
        self._update_time()
        self.someone_died = True
        self._emit(philosopher.number, Message.DIED)

    def _dine(self, philosopher: Philosopher) -> None:
        left = self._forks[philosopher.left_fork]
        right = self._forks[philosopher.right_fork]
        while (
            philosopher.alive
            and philosopher.meals_left != 0
            and not self.someone_died
        ):
            with left, right:
                if not self._eat(philosopher):
                    break
            if not self._sleep(philosopher):
                break
            self._think(philosopher)
        if not philosopher.alive:
            self._emit(philosopher.number, Message.DIED)

    def _eat(self, philosopher: Philosopher) -> bool:
        if self.someone_died:
            return False
        if self._starving(philosopher.last_meal):
            philosopher.alive = False
            self.someone_died = True
            return False
        philosopher.last_meal = self.global_time
        self._last_meals[philosopher.number] = philosopher.last_meal
        self._emit(philosopher.number, Message.EATING)
        if not self._wait(philosopher, self.settings.time_to_eat):
            return False
        if philosopher.meals_left is not None:
            philosopher.meals_left -= 1
        return True

    def _sleep(self, philosopher: Philosopher) -> bool:
        if self.someone_died:
            return False
        self._update_time()
        self._emit(philosopher.number, Message.SLEEPING)
        return self._wait(philosopher, self.settings.time_to_sleep)

    def _think(self, philosopher: Philosopher) -> None:
        self._update_time()
        self._emit(philosopher.number, Message.THINKING)

    def _wait(self, philosopher: Philosopher, duration_ms: int) -> bool:
        """Pass ``duration_ms`` in small steps, watching for deaths meanwhile."""
        begin = time.monotonic()
        while not self.someone_died:
            time.sleep(_TICK)
            self._update_time()
            if time.monotonic() - begin > duration_ms / 1000:
                break
            if philosopher.meals_left == 0:
                return False
            if self._starving(philosopher.last_meal):
                philosopher.alive = False
                self.someone_died = True
                return False
            if not self._check_others():
                return False
        return not self.someone_died

    def _check_others(self) -> bool:
        for number in range(1, self.settings.philosophers):
            if self.someone_died:
                break
            if self._starving(self._last_meals[number]):
                self.someone_died = True
                self._emit(number, Message.DIED)
                return False
        return True


def run_simulation(settings: Settings, out: Optional[TextIO] = None) -> bool:
    """Run the lock-based simulation; True when everyone was satisfied."""
    return Table(settings, out).run()