"""Circular (theta) grids: concentric rings subdivided as their circumference grows."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional

import networkx as nx

from ..base import Kind
from ..cell import Cell

if TYPE_CHECKING:
    from ..grid import Grid


class Polar(Kind):
    """Ring 0 is a single centre cell; ring ``r`` splits each inner cell into ``ratio`` cells."""

    cell_type = Cell

    def __init__(self, rows: int) -> None:
        if rows < 1:
            raise ValueError(f"Polar grids need at least one ring, got {rows}")
        self.rows = int(rows)
        self.row_lengths = self._compute_row_lengths()

    def _compute_row_lengths(self) -> List[int]:
        row_height = 1.0 / self.rows
        lengths = [1]
        for row in range(1, self.rows):
            radius = row / self.rows
            circumference = 2.0 * math.pi * radius
            previous_count = lengths[row - 1]
            estimated_cell_width = circumference / previous_count
            ratio = max(1, round(estimated_cell_width / row_height))
            lengths.append(previous_count * ratio)
        return lengths

    @property
    def num_rows(self) -> int:
        return self.rows

    @property
    def num_cols(self) -> int:
        return self.row_lengths[-1]

    def row_length(self, row: int) -> int:
        return self.row_lengths[row]

    def prepare_grid(self) -> nx.Graph:
        graph = nx.Graph()
        for row, length in enumerate(self.row_lengths):
            graph.add_nodes_from(Cell(row, col) for col in range(length))
        return graph

    # ------------------------------------------------------------------

    def clockwise(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        if cell.row == 0:
            return None
        return grid.get(cell.row, (cell.col + 1) % self.row_lengths[cell.row])

    def counter_clockwise(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        if cell.row == 0:
            return None
        return grid.get(cell.row, (cell.col - 1) % self.row_lengths[cell.row])

    def inward(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        if cell.row == 0:
            return None
        ratio = self.row_lengths[cell.row] // self.row_lengths[cell.row - 1]
        return grid.get(cell.row - 1, cell.col // ratio)

    def outward(self, grid: "Grid", cell: Cell) -> List[Cell]:
        row = cell.row + 1
        if row >= self.rows:
            return []
        ratio = self.row_lengths[row] // self.row_lengths[cell.row]
        first = cell.col * ratio
        cells = (grid.get(row, col) for col in range(first, first + ratio))
        return [outer for outer in cells if outer is not None]

    def neighbours(self, grid: "Grid", cell: Cell) -> List[Cell]:
        result: List[Cell] = []
        for candidate in (
            self.clockwise(grid, cell),
            self.counter_clockwise(grid, cell),
            self.inward(grid, cell),
        ):
            if candidate is not None and candidate != cell and candidate not in result:
                result.append(candidate)
        result.extend(self.outward(grid, cell))
        return result

    def next_in_row(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        return self.clockwise(grid, cell)

    def __repr__(self) -> str:
        return f"Polar(rows={self.rows})"


__all__ = ["Polar"]
