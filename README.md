# wildfire_sim

A small simulation of a wildfire spreading across a forest grid while an
animal tries to escape it.

The forest is a grid of integer cells (`wildfire_sim.forest.Cell`):

| value | name      | meaning        |
|-------|-----------|----------------|
| 0     | `SAFE`    | safe area      |
| 1     | `HEALTHY` | healthy forest |
| 2     | `BURNING` | burning        |
| 3     | `BURNT`   | burnt          |
| 4     | `WATER`   | water          |

## How a step works

Each iteration the animal moves first, unless it is dead. It never steps
straight back to the cell it just left. Among its four neighbours it prefers
water. Reaching water turns that cell into a safe area, and every
neighbouring cell that is not already safe becomes healthy forest. With no
water in reach it picks a random safe or healthy neighbour, and burnt cells
come last. Standing on a safe cell, the animal rests there for up to three
iterations before it moves on.

Then the fire spreads. The cells that caught fire in the previous step turn
to burnt, and the cells now burning set fire to each neighbouring healthy
cell that lies in a wind direction that is switched on. With the wind off,
the fire spreads to all four neighbours. If the fire reaches the animal's
cell, the animal gets one second chance: if any neighbour is not burning it
moves again, otherwise it dies and the iteration is recorded.

The run ends when the fire has burnt out or the iteration limit is reached.
The default limit is 1000 (`wildfire_sim.config.MAX_ITERATIONS`). The
initial grid is iteration 0.

## Installation

```
pip install .
```

## Input format

The input starts with four integers: the number of rows, the number of
columns, and the row and column where the fire starts. After them come the
grid rows, one per line. Missing values are taken as 0.

```
5 5 1 1
1 1 1 1 4
1 2 1 1 1
1 1 1 1 4
0 0 1 1 1
1 4 1 0 4
```

## Running

From a directory that holds `input.dat`:

```
wildfire-sim
```

Options:

- `--input PATH`: forest input file (default `input.dat`)
- `--output PATH`: output file (default `output.dat`)
- `--log PATH`: error log (default `log.txt`)
- `--max-iterations N`: iteration limit (default 1000)
- `--no-wind`: spread the fire to all four neighbours
- `--directions {south,north,east,west} ...`: wind directions (default: all)
- `--seed N`: seed for the animal's random moves

The output file is emptied first. Every iteration's grid is then written to
it, followed by a final report giving the animal's fate, its position, the
number of steps it took, how many times it found water, and the wind
settings. The output text is in Portuguese.

Errors are appended to the log file with a timestamp and printed to standard
error, and the command exits with status 1. Such errors are an input file
that is missing or unreadable, a grid with no safe or healthy cell for the
animal, and a fire start outside the grid.

## Library use

```python
import random

from wildfire_sim.config import WindConfig
from wildfire_sim.fileio import parse_forest
from wildfire_sim.simulation import simulate

with open("input.dat", encoding="utf-8") as handle:
    forest = parse_forest(handle.read())
result = simulate(forest, WindConfig(), 1000, random.Random(42))
print(result.animal.alive(), result.iterations, result.burnt_out)
```

`simulate` leaves the forest unchanged. It returns a `SimulationResult`
holding the animal, a list of `(iteration, grid)` frames, and whether the
fire burnt out. `run(input_path, output_path, log_path, wind,
max_iterations, rng)` does the same from files, as the command does.

The modules:

- `wildfire_sim.config`: `Direction`, `WindConfig` and `MAX_ITERATIONS`
- `wildfire_sim.forest`: `Cell` and `Forest`
- `wildfire_sim.animal`: `Animal`
- `wildfire_sim.fire`: `Fire` and `is_valid_position`
- `wildfire_sim.fileio`: `parse_forest`, `read_forest`, `format_grid`,
  `write_grid`, `format_report`, `write_report`, `clear_output`, `log_error`
  and `InputError`
- `wildfire_sim.simulation`: `place_animal`, `simulate`, `run`, `main`,
  `SimulationResult` and `SimulationError`

## What it does not do

The package writes plain text output only. It does not draw or animate the
grid.