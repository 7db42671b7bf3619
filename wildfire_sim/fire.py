"""Fire front that spreads across the forest grid step by step."""

from __future__ import annotations

from .config import WindConfig
from .forest import Cell


def is_valid_position(grid: list[list[int]], row: int, col: int) -> bool:
    """Tell whether (row, col) lies inside the grid."""
    return bool(grid) and 0 <= row < len(grid) and 0 <= col < len(grid[0])


class Fire:
    """A spreading fire: the cells burning now and those that caught last step."""

    def __init__(self, row: int, col: int, wind: WindConfig | None = None) -> None:
        self.wind = wind if wind is not None else WindConfig()
        self.next_front: list[tuple[int, int]] = [(row, col)]
        self.last_front: list[tuple[int, int]] = []

    def spread(self, grid: list[list[int]]) -> bool:
        """Advance the fire one step; return True once it has burnt out."""
        for row, col in self.last_front:
            grid[row][col] = Cell.BURNT.value

        self.last_front = self.next_front
        self.next_front = []

        offsets = self.wind.offsets()
        for row, col in self.last_front:
            for drow, dcol in offsets:
                self.burn(grid, row + drow, col + dcol)

        return not self.last_front

    def burn(self, grid: list[list[int]], row: int, col: int) -> None:
        """Set a healthy cell on fire and add it to the next front."""
        if is_valid_position(grid, row, col) and grid[row][col] == Cell.HEALTHY:
            grid[row][col] = Cell.BURNING.value
            self.next_front.append((row, col))