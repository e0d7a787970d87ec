"""Hexagonal grids with flat-topped cells; odd columns sit half a cell lower."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import networkx as nx

from ..base import Kind, check_dimensions
from ..cell import Cell

if TYPE_CHECKING:
    from ..grid import Grid


class Hex(Kind):
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
    def _north_diagonal(cell: Cell) -> int:
        return cell.row - 1 if cell.col % 2 == 0 else cell.row

    @staticmethod
    def _south_diagonal(cell: Cell) -> int:
        return cell.row if cell.col % 2 == 0 else cell.row + 1

    def north_west(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        return grid.get(self._north_diagonal(cell), cell.col - 1)

    def north_east(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        return grid.get(self._north_diagonal(cell), cell.col + 1)

    def south_west(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        return grid.get(self._south_diagonal(cell), cell.col - 1)

    def south_east(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        return grid.get(self._south_diagonal(cell), cell.col + 1)

    def neighbours(self, grid: "Grid", cell: Cell) -> List[Cell]:
        candidates = (
            self.north_west(grid, cell),
            grid.north(cell),
            self.north_east(grid, cell),
            self.south_west(grid, cell),
            grid.south(cell),
            self.south_east(grid, cell),
        )
        return [candidate for candidate in candidates if candidate is not None]

    def next_in_row(self, grid: "Grid", cell: Cell) -> Optional[Cell]:
        # (row, col + 1) is the north-east or south-east neighbour depending on column parity
        return grid.get(cell.row, cell.col + 1)


__all__ = ["Hex"]
