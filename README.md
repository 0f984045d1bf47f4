# philosim

A simulation of the dining philosophers problem. Philosophers sit around a
table and share forks. Each philosopher eats, sleeps and thinks in turn. To
eat, a philosopher needs two forks. A philosopher who goes `time_to_die`
milliseconds without starting a meal dies, and the simulation ends.

The package has two variants:

- `philo` (`philosim.simulation`) gives each philosopher its own thread.
  There is one fork, with its own lock, between each pair of neighbours. A
  monitor thread watches for deaths. The run also ends, with the line
  `Game Ended`, once every philosopher has eaten the requested number of
  meals.
- `philo-bonus` (`philosim.bonus`) puts all the forks in one shared
  counting semaphore, and a philosopher takes any two of them. Each
  philosopher has a watcher of its own that reports its death. The run ends
  at the first death, or with `Game Ended` as soon as any one philosopher
  has eaten the requested number of meals.

Both variants use threads inside one Python process.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
philo-bonus number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

Each argument must be a string of decimal digits whose value is no larger
than 2**64 - 1. Times are in milliseconds. If you leave out the last
argument, the philosophers eat until one of them dies.

Example:

```
philo 5 800 200 200 7
```

Each event is printed on its own line. The line starts with the number of
milliseconds since the simulation started:

```
0 ms philosopher nb 2 took left fork
0 ms philosopher nb 2 took right fork
0 ms philosopher nb 2 is eating
200 ms philosopher nb 2 is sleeping
...
```

A death prints `... is dead`, and nothing is printed after it.

If the arguments are invalid, the program prints a usage message to
standard error and exits with status 1.

## Library use

`philosim.parsing.parse_input` takes the arguments *after* the program
name and returns a `SimulationConfig`:

```python
import io

from philosim.parsing import parse_input
from philosim.simulation import Simulation

config = parse_input(["4", "410", "200", "200", "3"])
out = io.StringIO()
sim = Simulation(config, out)
sim.run()
print(out.getvalue())
print(sim.died)  # id of the philosopher who died, or None
```

`philosim.bonus.SemaphoreSimulation` is used the same way and also exposes
`run()` and `died`.

On bad input `parse_input` raises `philosim.errors.UsageError`, a subclass
of `philosim.errors.PhiloError`. Its `report()` method writes the usage
message to standard error and returns the exit status 1.

Other modules:

- `philosim.numbers` checks and converts digit strings (`is_num`,
  `exceeds_ulong_max`, `atoul`, `ultoa`, `digit_len`).
- `philosim.clock.Clock` is a millisecond clock that starts when it is created.
- `philosim.status` formats status lines (`format_status`, `PhiloState`).
  `StatusPrinter` writes them one at a time and stops after a death or an
  announcement.