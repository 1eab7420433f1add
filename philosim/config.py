"""Command-line settings for the dining philosophers simulations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .utils import is_numeric, parse_long

USAGE = (
    "You need to insert 4 or 5 arguments.\n"
    "- Number of philosophers.\n"
    "- Time to die.   (ms)\n"
    "- Time to eat.   (ms)\n"
    "- Time to sleep. (ms)\n"
    "- Number of times each philosopher must eat. (opt)"
)
NOT_NUMERIC = "You need to insert numerical values in all fields."
NOT_POSITIVE = "You need to insert values superior to 0 in all fields except argument 5."
ALREADY_SATISFIED = "0 all philosophers have eaten the required amount."


class SettingsError(ValueError):
    """Raised when the arguments do not describe a simulation to run.

    The message is what should be shown to the user; it is empty when the
    arguments are rejected silently (a philosopher count that reads as zero).
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: Optional[int] = None


def parse_settings(argv: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Raises SettingsError with the user-facing message when there are not 4
    or 5 arguments, when a field is not numeric, when a value is not
    positive (a given meal count may be zero), or when the meal count is
    zero so that nothing is left to simulate.
    """
    args = list(argv)
    if len(args) not in (4, 5):
        raise SettingsError(USAGE)

    philosophers = parse_long(args[0])
    if philosophers == 0:
        raise SettingsError()
    time_to_die, time_to_eat, time_to_sleep = (parse_long(arg) for arg in args[1:4])
    must_eat = parse_long(args[4]) if len(args) == 5 else None

    if not all(is_numeric(arg) for arg in args):
        raise SettingsError(NOT_NUMERIC)
    if (
        philosophers <= 0
        or time_to_die <= 0
        or time_to_eat <= 0
        or time_to_sleep <= 0
        or (must_eat is not None and must_eat < 0)
    ):
        raise SettingsError(NOT_POSITIVE)
    if must_eat == 0:
        raise SettingsError(ALREADY_SATISFIED)

    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        must_eat=must_eat,
    )