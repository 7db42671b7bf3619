"""Wind settings that steer how the fire spreads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_ITERATIONS = 1000

# Orthogonal spread order used when the wind is off.
_CALM_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Direction(Enum):
    """A wind direction, its grid offset and its report label."""

    SOUTH = (1, 0, "Sul")
    NORTH = (-1, 0, "Norte")
    EAST = (0, 1, "Leste")
    WEST = (0, -1, "Oeste")

    def __init__(self, drow: int, dcol: int, label: str) -> None:
        self.drow = drow
        self.dcol = dcol
        self.label = label

    @property
    def offset(self) -> tuple[int, int]:
        return (self.drow, self.dcol)


@dataclass(frozen=True)
class WindConfig:
    """Whether the wind blows and in which directions it carries the fire."""

    enabled: bool = True
    directions: frozenset[Direction] = field(default_factory=lambda: frozenset(Direction))

    def __post_init__(self) -> None:
        directions = frozenset(self.directions)
        for direction in directions:
            if not isinstance(direction, Direction):
                raise TypeError(f"not a wind direction: {direction!r}")
        object.__setattr__(self, "directions", directions)

    def offsets(self) -> list[tuple[int, int]]:
        """Return the (row, column) offsets the fire spreads to, in order."""
        if not self.enabled:
            return list(_CALM_OFFSETS)
        return [d.offset for d in Direction if d in self.directions]

    def describe(self) -> str:
        """Return the wind section of the final report."""
        if not self.enabled:
            return "O vento estava inativo\n"
        lines = ["O vento estava ativo nas direções:"]
        lines.extend(f" {d.label}" for d in Direction if d in self.directions)
        return "\n".join(lines) + "\n\n"