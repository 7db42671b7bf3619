"""An animal that flees the fire across the forest grid."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .forest import Cell

_MOVES: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_MAX_SAFE_WAIT = 3


def _inside(grid: list[list[int]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and bool(grid) and 0 <= col < len(grid[0])


def _neighbours(grid: list[list[int]], row: int, col: int):
    for drow, dcol in _MOVES:
        r, c = row + drow, col + dcol
        if _inside(grid, r, c):
            yield r, c


@dataclass
class Animal:
    """Position and running tallies of the fleeing animal.

    ``death`` is 0 while the animal lives, otherwise the iteration it died in.
    """

    position: tuple[int, int] = (-1, -1)
    previous_position: tuple[int, int] = (0, 0)
    safe_time: int = 0
    steps: int = 0
    water_found: int = 0
    death: int = 0

    def alive(self) -> bool:
        return self.death == 0

    def _step_to(self, target: tuple[int, int]) -> None:
        self.previous_position = self.position
        self.position = target
        self.steps += 1

    def move(self, grid: list[list[int]], rng: random.Random | None = None) -> None:
        """Move one step, preferring water, then open ground, then burnt ground."""
        rng = rng or random
        row, col = self.position

        water = None
        open_ground: list[tuple[int, int]] = []
        burnt: list[tuple[int, int]] = []
        for target in _neighbours(grid, row, col):
            if target == self.previous_position:
                continue
            value = grid[target[0]][target[1]]
            if value == Cell.WATER:
                water = target
                break
            if value in (Cell.HEALTHY, Cell.SAFE):
                open_ground.append(target)
            elif value == Cell.BURNT:
                burnt.append(target)

        if grid[row][col] == Cell.SAFE:
            if self.safe_time < _MAX_SAFE_WAIT:
                self.safe_time += 1
                return
            self.safe_time = 0

        if water is not None:
            self._step_to(water)
            self.water_found += 1
            wr, wc = water
            grid[wr][wc] = Cell.SAFE.value
            for r, c in _neighbours(grid, wr, wc):
                if grid[r][c] != Cell.SAFE:
                    grid[r][c] = Cell.HEALTHY.value
            self.safe_time += 1
        elif open_ground:
            target = rng.choice(open_ground)
            self._step_to(target)
            if grid[target[0]][target[1]] == Cell.SAFE:
                self.safe_time += 1
        elif burnt:
            self._step_to(rng.choice(burnt))

    def second_chance(self, grid: list[list[int]], rng: random.Random | None = None) -> bool:
        """Try to escape a burning cell; return False when fire surrounds the animal."""
        row, col = self.position
        for r, c in _neighbours(grid, row, col):
            if grid[r][c] != Cell.BURNING:
                self.move(grid, rng)
                return True
        return False