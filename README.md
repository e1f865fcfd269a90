# philosim

philosim simulates the dining philosophers problem with threads. Each
philosopher runs in its own thread. A philosopher picks up the two forks
beside it, eats, puts the forks down, sleeps and thinks, and then starts
again. A monitor watches every philosopher. It stops the simulation when one
of them goes longer than the time to die without eating, or when every one of
them has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philosim number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_goal]
```

The same command can also be run as `python -m philosim.cli`.

- `number_of_philosophers`: from 1 to 200.
- `time_to_die`, `time_to_eat`, `time_to_sleep`: in milliseconds, at least 60 each.
- `meals_goal` (optional): at least 1. Without it, the simulation runs until a
  philosopher dies.

Every argument must be a plain decimal integer. It may have no sign, no
spaces and no leading zeros, and it must fit in a signed 32-bit int.

Example:

```
philosim 5 800 200 200 7
```

Each event goes to standard output on its own line. A line holds the
milliseconds elapsed since the start, the philosopher's number (counted from
1) and the action. The actions are `has taken a fork`, `is eating`,
`is sleeping`, `is thinking` and `died`. For example:

```
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
200 2 is sleeping
```

Once the simulation has ended, no further lines are printed. Philosophers with
odd numbers (1, 3, 5, ...) wait one millisecond before they first reach for
their forks. A lone philosopher has only one fork: it picks it up, holds it
past its time to die, and the monitor reports its death.

If the arguments are invalid, `Error: Invalid arguments` goes to standard
error and the command exits with status 3. It exits with status 0 when the
simulation ends normally.

## Library use

```python
import io

from philosim.arguments import parse_arguments
from philosim.simulation import Simulation

params = parse_arguments(["4", "410", "200", "200", "3"])
out = io.StringIO()
Simulation(params, stream=out).run()
print(out.getvalue())
```

- `philosim.arguments`: `parse_arguments` validates the arguments (without
  the program name) and returns a frozen `Parameters` dataclass
  (`nb_philo`, `time_to_die`, `time_to_eat`, `time_to_sleep`, `eat_goal`,
  the last being `None` when not given). `check_arguments` only validates;
  `is_valid_positive_int` and `atoi` are the helpers they use.
- `philosim.simulation`: `Simulation(params, stream=None)` writes its log to
  `stream`, standard output by default. `run()` starts the philosopher
  threads, blocks in `monitor()` until the end, then joins the threads.
  `end()` stops the simulation and `has_ended()` reports whether it has
  stopped.
- `philosim.timing`: `now_ms()` reads a monotonic millisecond clock and
  `sleep_precise(milliseconds)` sleeps in half-millisecond steps.
- `philosim.errors`: the `Status` codes, the `PhiloError` exceptions
  (`ArgumentsError`, `SystemCallError`, `ThreadCreationError`,
  `ThreadJoinError`), `error_message(status)` and
  `report_error(error, stream=None)`, which writes the message and returns
  the exit code.