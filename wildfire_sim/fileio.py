"""Reading the forest input file and writing the simulation output and log."""

from __future__ import annotations

import re
import time
from itertools import chain, islice, repeat
from os import PathLike
from typing import Union

from .animal import Animal
from .config import WindConfig
from .forest import Forest

StrPath = Union[str, "PathLike[str]"]

SEPARATOR = "-" * 40

_HEADER = re.compile(r"\s*(\S+)\s+(\S+)\s+(\S+)\s+(\S+)")


class InputError(Exception):
    """The forest input could not be opened or understood."""


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise InputError(f"Valor inválido no arquivo de entrada: {token!r}") from exc


def parse_forest(text: str) -> Forest:
    """Build a forest from input text.

    The text starts with the row count, column count and the fire's start
    row and column, followed by one line of cell values per row. Missing
    values are taken as 0.
    """
    match = _HEADER.match(text)
    if match is None:
        raise InputError("Cabeçalho do arquivo de entrada incompleto")
    rows, cols, fire_row, fire_col = (_to_int(token) for token in match.groups())
    if rows < 0 or cols < 0:
        raise InputError(f"Dimensões inválidas: {rows} x {cols}")

    # One character after the header (its line break) is skipped.
    body = text[match.end() + 1:]
    lines = chain(body.split("\n"), repeat(""))
    grid = []
    for line in islice(lines, rows):
        values = [_to_int(token) for token in line.split()[:cols]]
        values.extend([0] * (cols - len(values)))
        grid.append(values)
    return Forest(grid=grid, fire_row=fire_row, fire_col=fire_col)


def read_forest(path: StrPath) -> Forest:
    """Read and parse the forest input file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise InputError(f"Erro ao abrir o arquivo {path}") from exc
    return parse_forest(text)


def format_grid(grid: list[list[int]], iteration: int) -> str:
    """Render one iteration's grid as it appears in the output file."""
    lines = [f"interação: {iteration}"]
    lines.extend("".join(f"{value} " for value in row) for row in grid)
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def write_grid(path: StrPath, grid: list[list[int]], iteration: int) -> None:
    """Append one iteration's grid to the output file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(format_grid(grid, iteration))


def format_report(animal: Animal, wind: WindConfig | None = None) -> str:
    """Render the final report on the animal and the wind."""
    wind = wind if wind is not None else WindConfig()
    if animal.alive():
        fate = "Animal sobreviveu"
    else:
        fate = f"Animal morreu na iteração: {animal.death}"
    row, col = animal.position
    return (
        f"{fate}\n"
        f"Animal na posição: ({row}, {col})\n"
        f"Passos: {animal.steps}, Encontrou água: {animal.water_found}\n"
        f"{wind.describe()}"
        f"{SEPARATOR}\n"
    )


def write_report(path: StrPath, animal: Animal, wind: WindConfig | None = None) -> None:
    """Append the final report to the output file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(format_report(animal, wind))


def clear_output(path: StrPath) -> None:
    """Empty the output file, creating it if needed."""
    with open(path, "w", encoding="utf-8"):
        pass


def log_error(path: StrPath, message: str) -> None:
    """Append a timestamped error message to the log file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"[{time.ctime()}] {message}\n")