# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. It picks up the two forks beside it, eats, sleeps and thinks. A
monitor thread watches the table. It ends the simulation when a philosopher
starves, or when every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philosopher_must_eat]
```

The same entry point can also be started with `python -m philosophers.cli`.

All times are in milliseconds. Every argument must be made only of the digits
0 to 9, be at most ten characters long and have a value greater than zero.

Example:

```
philo 5 800 200 200 7
```

Each event goes to standard output on a line of its own:

```
<elapsed_ms> <philosopher_id> <action>
```

Philosophers are numbered from 1. The action is one of `has taken a fork`,
`is eating`, `is sleeping`, `is thinking` or `died`. Nothing is printed after
the simulation has stopped.

With a single philosopher there is only one fork: the philosopher takes it,
waits `time_to_die` milliseconds and dies.

If the number of arguments is wrong, the program prints a usage message and
exits with status 1. If an argument is invalid, it prints
`Error: Invalid arguments` and exits with status 1. Otherwise it exits with
status 0 once the simulation has ended.

## Library use

```python
from philosophers.parsing import parse_args
from philosophers.table import StopReason, Table

settings = parse_args(["4", "410", "200", "200", "3"])
reason = Table(settings).run()
print(reason is StopReason.ALL_EATEN)
```

- `philosophers.parsing.parse_args` takes the arguments after the program name
  and returns a frozen `Settings` dataclass (`num_philos`, `time_to_die`,
  `time_to_eat`, `time_to_sleep`, `must_eat_count`, the last `None` when not
  given). It raises `UsageError` when there are not four or five arguments and
  `ArgumentError` when a value is not accepted; both are `ValueError`s.
- `philosophers.table.Table(settings, output=None)` holds the forks and the
  `Philosopher` objects. `run()` starts the threads, waits for them and returns
  a `StopReason` (`DIED` or `ALL_EATEN`). Event lines go to `output`, or to
  standard output when it is `None`.
- `philosophers.clock` offers `now_ms()` and `sleep_ms(milliseconds)`.

## Development

```
pip install -e ".[test]"
pytest
```