"""Four-neighbour square topologies: plain, weighted and masked."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import networkx as nx

from ..base import Kind, check_dimensions
from ..cell import Cell
from ..mask import Mask

if TYPE_CHECKING:
    from ..grid import Grid


class SquareKind(Kind):
    """Shared adjacency for grids whose cells touch north, south, west and east."""

    cell_type = Cell

    def neighbours(self, grid: "Grid", cell: Cell) -> List[Cell]:
        candidates = (grid.north(cell), grid.south(cell), grid.west(cell), grid.east(cell))
        return [candidate for candidate in candidates if candidate is not None]


class Regular(SquareKind):
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


class Weighted(Regular):
    """Regular grid whose cells carry a traversal cost (default 1)."""

    weighted = True

    def prepare_grid(self) -> nx.Graph:
        graph = super().prepare_grid()
        nx.set_node_attributes(graph, 1, "weight")
        return graph


class Masked(SquareKind):
    """Square grid restricted to the open cells of a :class:`~mazes.mask.Mask`."""

    def __init__(self, mask: Mask) -> None:
        self.mask = mask

    @property
    def num_rows(self) -> int:
        return self.mask.rows

    @property
    def num_cols(self) -> int:
        return self.mask.cols

    def prepare_grid(self) -> nx.Graph:
        graph = nx.Graph()
        graph.add_nodes_from(Cell(row, col) for row, col in self.mask.locations())
        return graph


__all__ = ["SquareKind", "Regular", "Weighted", "Masked"]
