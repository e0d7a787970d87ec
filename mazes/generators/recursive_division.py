"""Recursive division: wall-adding generation on a fully open grid."""

from __future__ import annotations

import logging
from typing import Any

from ..base import AbstractMazeGenerator
from ..grid import Grid
from ..kinds import Regular

logger = logging.getLogger(__name__)


class RecursiveDivision(AbstractMazeGenerator):
    """Open every passage, then split regions with walls that keep a single gap.

    Regions smaller than ``room_size`` in both directions are left undivided with
    probability ``room_chance``, which leaves open rooms in the maze.
    """

    name = "recursive_division"
    supported_kinds = (Regular,)

    def __init__(self, *, room_chance: float = 0.25, room_size: int = 5, **kwargs) -> None:
        super().__init__(**kwargs)
        self.room_chance = room_chance
        self.room_size = room_size
        self._walls = 0

    def carve(self, grid: Grid) -> None:
        for cell in grid.cells():
            for neighbour in grid.neighbours(cell):
                grid.link(cell, neighbour)

        self._walls = 0
        self._divide(grid, 0, 0, grid.num_rows, grid.num_cols)
        logger.debug("recursive division raised %d walls", self._walls)

    def _divide(self, grid: Grid, row: int, col: int, height: int, width: int) -> None:
        if height <= 1 or width <= 1:
            return
        if (
            height < self.room_size
            and width < self.room_size
            and self._rng.random() < self.room_chance
        ):
            return

        if height > width:
            self._divide_horizontally(grid, row, col, height, width)
        else:
            self._divide_vertically(grid, row, col, height, width)

    def _divide_horizontally(self, grid: Grid, row: int, col: int, height: int, width: int) -> None:
        divide_south_of = self._rng.randrange(height - 1)
        passage_at = self._rng.randrange(width)

        for x in range(width):
            if x != passage_at:
                cell = self._cell_at(grid, row + divide_south_of, col + x)
                south = grid.south(cell)
                if south is None:
                    raise RuntimeError(f"Division line runs below the grid at {cell!r}")
                grid.unlink(cell, south)
        self._walls += 1

        self._divide(grid, row, col, divide_south_of + 1, width)
        self._divide(grid, row + divide_south_of + 1, col, height - divide_south_of - 1, width)

    def _divide_vertically(self, grid: Grid, row: int, col: int, height: int, width: int) -> None:
        divide_east_of = self._rng.randrange(width - 1)
        passage_at = self._rng.randrange(height)

        for y in range(height):
            if y != passage_at:
                cell = self._cell_at(grid, row + y, col + divide_east_of)
                east = grid.east(cell)
                if east is None:
                    raise RuntimeError(f"Division line runs past the east edge at {cell!r}")
                grid.unlink(cell, east)
        self._walls += 1

        self._divide(grid, row, col, height, divide_east_of + 1)
        self._divide(grid, row, col + divide_east_of + 1, height, width - divide_east_of - 1)

    @staticmethod
    def _cell_at(grid: Grid, row: int, col: int) -> Any:
        cell = grid.get(row, col)
        if cell is None:
            raise RuntimeError(f"Division region reaches outside the grid at ({row}, {col})")
        return cell


__all__ = ["RecursiveDivision"]
