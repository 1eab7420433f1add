"""Command-line entry points for the two dining philosophers simulations."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TextIO

from .config import Settings, SettingsError, parse_settings
from .semaphore_sim import run_semaphore_simulation
from .simulation import run_simulation

_Runner = Callable[[Settings, Optional[TextIO]], bool]


def _run(argv: Optional[Sequence[str]], runner: _Runner) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except SettingsError as error:
        if error.message:
            print(error.message)
        return 0
    runner(settings, None)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation where each fork is a lock shared by two neighbours.

    Arguments are: number of philosophers, time to die, time to eat, time to
    sleep (all in milliseconds) and, optionally, how many times each must eat.
    Problems with the arguments are reported on standard output.
    """
    return _run(argv, run_simulation)


def main_bonus(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation where a shared semaphore hands out the forks."""
    return _run(argv, run_semaphore_simulation)


if __name__ == "__main__":
    sys.exit(main())