"""Dining philosophers where a counting semaphore hands out pairs of forks.

Each philosopher keeps a private view of the clock and of meal times, as if it
ran in its own process; the first philosopher to finish, by dying or by being
satisfied, stops the whole table.
"""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from .config import Settings
from .simulation import Philosopher
from .utils import Message, format_message

_TICK = 0.00005
_POLL = 0.01


class _Killed(Exception):
    """Signals a philosopher that the table has been stopped."""


@dataclass
class _Process:
    philosopher: Philosopher
    meals_seen: List[int]
    global_time: int = 0
    died: bool = False


@dataclass
class _Outcome:
    satisfied: bool = False
    stopped: threading.Event = field(default_factory=threading.Event)


class SemaphoreTable:
    """Runs the simulation with a shared fork semaphore of half the table size."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        count = settings.philosophers
        self.philosophers = [
            Philosopher(
                number=index + 1,
                left_fork=count - 1 if index == 0 else index - 1,
                right_fork=index,
                meals_left=settings.must_eat,
            )
            for index in range(count)
        ]
        self._forks = threading.Semaphore(count // 2)
        self._output_lock = threading.Lock()
        self._outcome = _Outcome()
        self._start = 0.0

    @property
    def satisfied(self) -> bool:
        """True when the table stopped because a philosopher was satisfied."""
        return self._outcome.satisfied

    def run(self) -> bool:
        """Run until the first philosopher finishes; True if it was satisfied."""
        self._start = time.monotonic()
        count = self.settings.philosophers
        threads = [
            threading.Thread(
                target=self._live,
                args=(_Process(philosopher, [0] * (count + 1)),),
                daemon=True,
            )
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return self._outcome.satisfied

    def _live(self, proc: _Process) -> None:
        try:
            if self.settings.philosophers == 1:
                self._single(proc)
                self._finish(None)
                return
            self._dine(proc)
            if proc.philosopher.meals_left != 0:
                self._finish(None)
            else:
                self._finish(proc.global_time)
        except _Killed:
            pass

    def _finish(self, satisfied_at: Optional[int]) -> None:
        with self._output_lock:
            if self._outcome.stopped.is_set():
                raise _Killed
            if satisfied_at is not None:
                self.out.write(f"{satisfied_at} everyone is satisfied\n")
                self._outcome.satisfied = True
            self._outcome.stopped.set()

    def _emit(self, timestamp: int, number: int, message: Message) -> None:
        with self._output_lock:
            if self._outcome.stopped.is_set():
                raise _Killed
            self.out.write(format_message(timestamp, number, message))

    def _update_time(self, proc: _Process) -> None:
        proc.global_time = int((time.monotonic() - self._start) * 1000)

    def _starving(self, proc: _Process, last_meal: int) -> bool:
        return proc.global_time - last_meal > self.settings.time_to_die

    def _single(self, proc: _Process) -> None:
        number = proc.philosopher.number
        self._emit(proc.global_time, number, Message.TAKEN_SINGLE_FORK)
        time.sleep(self.settings.time_to_die / 1000)
        self._update_time(proc)
        proc.died = True
        self._emit(proc.global_time, number, Message.DIED)

    def _take_forks(self) -> None:
        while not self._forks.acquire(timeout=_POLL):
            if self._outcome.stopped.is_set():
                raise _Killed

    def _dine(self, proc: _Process) -> None:
        philosopher = proc.philosopher
        while philosopher.alive and philosopher.meals_left != 0 and not proc.died:
            self._take_forks()
            try:
                ate = self._eat(proc)
            finally:
                self._forks.release()
            if not ate:
                break
            if not self._sleep(proc):
                break
            self._think(proc)
        if not philosopher.alive:
            self._emit(proc.global_time, philosopher.number, Message.DIED)

    def _eat(self, proc: _Process) -> bool:
        philosopher = proc.philosopher
        self._update_time(proc)
        if proc.died:
            return False
        if self._starving(proc, philosopher.last_meal):
            philosopher.alive = False
            proc.died = True
            return False
        philosopher.last_meal = proc.global_time
        proc.meals_seen[philosopher.number] = philosopher.last_meal
        self._emit(proc.global_time, philosopher.number, Message.EATING)
        if not self._wait(proc, self.settings.time_to_eat):
            return False
        if philosopher.meals_left is not None:
            philosopher.meals_left -= 1
        return True

    def _sleep(self, proc: _Process) -> bool:
        if proc.died:
            return False
        self._update_time(proc)
        self._emit(proc.global_time, proc.philosopher.number, Message.SLEEPING)
        return self._wait(proc, self.settings.time_to_sleep)

    def _think(self, proc: _Process) -> None:
        self._update_time(proc)
        self._emit(proc.global_time, proc.philosopher.number, Message.THINKING)

    def _wait(self, proc: _Process, duration_ms: int) -> bool:
        philosopher = proc.philosopher
        begin = time.monotonic()
        while not proc.died:
            time.sleep(_TICK)
            if self._outcome.stopped.is_set():
                raise _Killed
            self._update_time(proc)
            if time.monotonic() - begin > duration_ms / 1000:
                break
            if philosopher.meals_left == 0:
                return False
            if self._starving(proc, philosopher.last_meal):
                philosopher.alive = False
                proc.died = True
                return False
            if not self._check_others(proc):
                return False
        return not proc.died

    def _check_others(self, proc: _Process) -> bool:
        for number in range(1, self.settings.philosophers):
            if proc.died:
                break
            if self._starving(proc, proc.meals_seen[number]):
                proc.died = True
                self._emit(proc.global_time, number, Message.DIED)
                return False
        return True


def run_semaphore_simulation(settings: Settings, out: Optional[TextIO] = None) -> bool:
    """Run the semaphore-based simulation; True if it ended satisfied."""
    return SemaphoreTable(settings, out).run()