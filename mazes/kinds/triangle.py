"""Triangle grids: alternating upright and inverted triangles along each row."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import networkx as nx

from ..base import Kind, check_dimensions
from ..cell import Cell

if TYPE_CHECKING:
    from ..grid import Grid


class Triangle(Kind):
    cell_type = Cell

    def __init__(self, rows: int, cols: int) -> None:
        self.rows, self.cols = check_dimensions(rows, cols)

    @property
    def num_rows(self) -> int:
        return self.rows

    @property
    def num_cols(self) -> int:
        return self.cols

    def prepare_grid(self) -> nx.Graph:
        graph = nx.Graph()
        graph.add_nodes_from(Cell(row, col) for row in range(self.rows) for col in range(self.cols))
        return graph

    @staticmethod
    def is_upright(cell: Cell) -> bool:
        return (cell.row + cell.col) % 2 == 0

    def neighbours(self, grid: "Grid", cell: Cell) -> List[Cell]:
        # upright triangles share their base with the row below, inverted ones with the row above
        vertical = grid.south(cell) if self.is_upright(cell) else grid.north(cell)
        candidates = (grid.west(cell), grid.east(cell), vertical)
        return [candidate for candidate in candidates if candidate is not None]


__all__ = ["Triangle"]
