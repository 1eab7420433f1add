# philosim

A simulation of the dining philosophers problem. Philosophers sit around a
table, take forks, eat, sleep and think. The simulation prints each action
with the number of milliseconds since the start.

The package provides two variants:

- `philo` gives every fork its own lock and runs one thread per philosopher.
  The run ends when a philosopher starves, or when every philosopher has
  eaten the required number of times.
- `philo-bonus` keeps the forks in a single shared counting semaphore. The
  semaphore holds half as many permits as there are philosophers, and a
  philosopher takes one permit for each meal. Each philosopher keeps its own
  view of the clock and of meal times. The whole table stops as soon as the
  first philosopher finishes, either by starving or by eating its required
  number of meals.

## Installation

```
pip install .
```

## Usage

```
philo <philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [must_eat]
philo-bonus <philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [must_eat]
```

All times are in milliseconds. The fifth argument is optional and sets how
many times each philosopher must eat. Without it, the philosophers keep going
until one of them dies.

Examples:

```
philo 5 800 200 200 7
philo 1 800 200 200
philo-bonus 4 410 200 200 3
```

Each action produces one line of output. When a philosopher eats, the
simulation first announces that it has taken two forks:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
```

When the run ends because the philosophers ate enough, the last line is
`<time> everyone is satisfied`. A philosopher that starves is reported as
`<time> <n> died`. With a single philosopher, the program prints one
`has taken a fork` line, waits `time_to_die`, and then reports that the
philosopher died.

Invalid arguments are reported on standard output, and the commands always
exit with status 0:

- A wrong number of arguments prints a usage summary.
- Fields that are not numeric print
  `You need to insert numerical values in all fields.` A numeric field is an
  optional `-` followed by digits.
- Values that are not above zero are rejected with a message. The meal count
  may be zero.
- A meal count of `0` prints
  `0 all philosophers have eaten the required amount.` and the program stops.
- A philosopher count that reads as zero is rejected without any message.

## Library use

`philosim.config.parse_settings` takes the arguments that follow the program
name. It returns a frozen `Settings` dataclass with these fields:

- `philosophers`
- `time_to_die`
- `time_to_eat`
- `time_to_sleep`
- `must_eat` (`None` when no meal count is given)

If the arguments are invalid, it raises `SettingsError`. Its `message`
attribute holds the text shown to the user.

```python
import sys
from philosim.config import parse_settings
from philosim.simulation import run_simulation

settings = parse_settings(["5", "800", "200", "200", "3"])
satisfied = run_simulation(settings, sys.stdout)
```

`run_simulation` returns `True` when every philosopher was satisfied. The
same run is available as `philosim.simulation.Table(settings, out).run()`.

`philosim.semaphore_sim.run_semaphore_simulation(settings, out)` runs the
semaphore variant. It is also available as `SemaphoreTable(settings, out).run()`,
and returns `True` when the table stopped because a philosopher was
satisfied.

In both functions, `out` defaults to standard output.

The helpers in `philosim.utils` are also public:

- `parse_long` reads the leading integer of a string. It skips leading
  whitespace, accepts one sign, and saturates at the 64-bit limit.
- `is_numeric` checks that a string is an optional `-` followed by digits.
- `format_message` renders the status lines for a `Message`.

The functions `philosim.cli.main(argv=None)` and
`philosim.cli.main_bonus(argv=None)` are the two commands. Both take an
argument list without the program name.

## Tests

```
pip install .[test]
pytest
```