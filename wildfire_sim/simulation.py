"""Running the fire and animal simulation and its command-line entry point."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field

from .animal import Animal
from .config import MAX_ITERATIONS, Direction, WindConfig
from .fileio import (
    InputError,
    StrPath,
    clear_output,
    format_grid,
    format_report,
    log_error,
    read_forest,
)
from .fire import Fire
from .forest import Cell, Forest


class SimulationError(Exception):
    """The simulation cannot be set up from the given forest."""


@dataclass
class SimulationResult:
    """Outcome of a simulation: the animal, each iteration's grid and whether the fire burnt out."""

    animal: Animal
    frames: list[tuple[int, list[list[int]]]] = field(default_factory=list)
    burnt_out: bool = False

    @property
    def grid(self) -> list[list[int]]:
        """The grid after the last iteration."""
        return self.frames[-1][1]

    @property
    def iterations(self) -> int:
        """Number of the last iteration that was run."""
        return self.frames[-1][0]


def place_animal(grid: list[list[int]]) -> tuple[int, int]:
    """Return the first safe or healthy cell, scanning row by row."""
    for row, cells in enumerate(grid):
        for col, value in enumerate(cells):
            if value in (Cell.SAFE, Cell.HEALTHY):
                return (row, col)
    raise SimulationError("Não foi possível encontrar uma posição segura para o animal.")


def simulate(
    forest: Forest,
    wind: WindConfig | None = None,
    max_iterations: int = MAX_ITERATIONS,
    rng: random.Random | None = None,
) -> SimulationResult:
    """Run the simulation until the fire burns out or the iteration limit is reached.

    The forest itself is left unchanged.
    """
    if not forest.in_bounds(forest.fire_row, forest.fire_col):
        raise SimulationError(
            f"Posição inicial do incêndio fora da matriz: ({forest.fire_row}, {forest.fire_col})"
        )
    grid = [list(row) for row in forest.grid]
    animal = Animal(position=place_animal(grid))
    fire = Fire(forest.fire_row, forest.fire_col, wind)
    result = SimulationResult(animal=animal, frames=[(0, [list(row) for row in grid])])

    for iteration in range(1, max_iterations):
        if result.burnt_out:
            break
        if animal.alive():
            animal.move(grid, rng)

        result.burnt_out = fire.spread(grid)

        row, col = animal.position
        if grid[row][col] == Cell.BURNING and not animal.second_chance(grid, rng):
            animal.death = iteration

        result.frames.append((iteration, [list(r) for r in grid]))

    return result


def run(
    input_path: StrPath = "input.dat",
    output_path: StrPath = "output.dat",
    log_path: StrPath = "log.txt",
    wind: WindConfig | None = None,
    max_iterations: int = MAX_ITERATIONS,
    rng: random.Random | None = None,
) -> SimulationResult:
    """Read the input file, simulate, and write every grid and the report.

    Failures are recorded in the log file and then raised.
    """
    try:
        try:
            clear_output(output_path)
        except OSError as exc:
            raise OSError(f"Erro ao abrir o arquivo {output_path}") from exc
        forest = read_forest(input_path)
        result = simulate(forest, wind, max_iterations, rng)
        try:
            with open(output_path, "a", encoding="utf-8") as out:
                for iteration, grid in result.frames:
                    out.write(format_grid(grid, iteration))
                out.write(format_report(result.animal, wind))
        except OSError as exc:
            raise OSError(f"Erro ao abrir o arquivo {output_path}") from exc
    except (InputError, SimulationError, OSError) as exc:
        log_error(log_path, str(exc))
        raise
    return result


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a forest fire and a fleeing animal.")
    parser.add_argument("--input", default="input.dat", help="forest input file")
    parser.add_argument("--output", default="output.dat", help="simulation output file")
    parser.add_argument("--log", default="log.txt", help="error log file")
    parser.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS)
    parser.add_argument("--no-wind", action="store_true", help="spread the fire without wind")
    parser.add_argument(
        "--directions",
        nargs="+",
        choices=[d.name.lower() for d in Direction],
        help="wind directions (default: all)",
    )
    parser.add_argument("--seed", type=int, help="seed for the animal's random moves")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    args = _parse_args(argv)
    if args.directions:
        directions = frozenset(Direction[name.upper()] for name in args.directions)
    else:
        directions = frozenset(Direction)
    wind = WindConfig(enabled=not args.no_wind, directions=directions)
    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        run(args.input, args.output, args.log, wind, args.max_iterations, rng)
    except (InputError, SimulationError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())