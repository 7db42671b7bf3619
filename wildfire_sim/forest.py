"""Forest grid and the meaning of its cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Cell(IntEnum):
    """States a grid cell can be in."""

    SAFE = 0
    HEALTHY = 1
    BURNING = 2
    BURNT = 3
    WATER = 4


@dataclass
class Forest:
    """A forest grid together with the cell where the fire starts."""

    grid: list[list[int]] = field(default_factory=list)
    fire_row: int = 0
    fire_col: int = 0

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def in_bounds(self, row: int, col: int) -> bool:
        """Tell whether (row, col) lies inside the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols