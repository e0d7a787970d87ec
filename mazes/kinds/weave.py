"""Weave grids: square grids whose passages may tunnel beneath one another."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

import networkx as nx

from ..base import Kind, check_dimensions
from ..cell import WeaveCell

if TYPE_CHECKING:
    from ..grid import Grid

logger = logging.getLogger(__name__)

DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Weave(Kind):
    """Square grid of Over cells; Under cells appear only when a tunnel is dug.

    An Over cell also counts the cell two steps away as a neighbour when the cell in
    between carries a straight passage running across the line between them, so a
    link to it becomes a tunnel beneath that passage. ``preconfigured`` turns this
    off for generators that place their tunnels explicitly.
    """

    cell_type = WeaveCell

    def __init__(self, rows: int, cols: int, *, preconfigured: bool = False) -> None:
        self.rows, self.cols = check_dimensions(rows, cols)
        self.preconfigured = preconfigured

    @property
    def num_rows(self) -> int:
        return self.rows

    @property
    def num_cols(self) -> int:
        return self.cols

    def prepare_grid(self) -> nx.Graph:
        graph = nx.Graph()
        graph.add_nodes_from(
            WeaveCell(row, col) for row in range(self.rows) for col in range(self.cols)
        )
        return graph

    # ------------------------------------------------------------------

    @staticmethod
    def linked_towards(grid: "Grid", cell: WeaveCell, drow: int, dcol: int) -> bool:
        """Whether ``cell`` has a passage leading to the position one step away."""

        target = (cell.row + drow, cell.col + dcol)
        return any((link.row, link.col) == target for link in grid.links(cell))

    def is_horizontal_passage(self, grid: "Grid", cell: WeaveCell) -> bool:
        return (
            self.linked_towards(grid, cell, 0, -1)
            and self.linked_towards(grid, cell, 0, 1)
            and not self.linked_towards(grid, cell, -1, 0)
            and not self.linked_towards(grid, cell, 1, 0)
        )

    def is_vertical_passage(self, grid: "Grid", cell: WeaveCell) -> bool:
        return (
            self.linked_towards(grid, cell, -1, 0)
            and self.linked_towards(grid, cell, 1, 0)
            and not self.linked_towards(grid, cell, 0, -1)
            and not self.linked_towards(grid, cell, 0, 1)
        )

    @staticmethod
    def _tunnel_joins(grid: "Grid", over: WeaveCell, other: WeaveCell) -> bool:
        under = over.tunnel()
        return under in grid and grid.are_linked(under, other)

    def _hop(self, grid: "Grid", cell: WeaveCell, drow: int, dcol: int) -> Optional[WeaveCell]:
        middle = grid.get(cell.row + drow, cell.col + dcol)
        if middle is None or middle.tunnel() in grid:
            return None
        target = grid.get(cell.row + 2 * drow, cell.col + 2 * dcol)
        if target is None:
            return None
        crossing = self.is_horizontal_passage if drow else self.is_vertical_passage
        return target if crossing(grid, middle) else None

    def neighbours(self, grid: "Grid", cell: WeaveCell) -> List[WeaveCell]:
        if cell.is_under:
            return list(grid.links(cell))

        result: List[WeaveCell] = []
        for drow, dcol in DIRECTIONS:
            adjacent = grid.get(cell.row + drow, cell.col + dcol)
            if adjacent is not None and not (
                self._tunnel_joins(grid, adjacent, cell) or self._tunnel_joins(grid, cell, adjacent)
            ):
                result.append(adjacent)
        if not self.preconfigured:
            for drow, dcol in DIRECTIONS:
                hop = self._hop(grid, cell, drow, dcol)
                if hop is not None:
                    result.append(hop)
        return result

    def interpret_link(self, grid: "Grid", cell: WeaveCell, other: WeaveCell) -> None:
        middle = self._between(grid, cell, other)
        if middle is None or self.preconfigured:
            grid.connect(cell, other)
            return
        under = grid.tunnel_under(middle)
        grid.connect(cell, under)
        grid.connect(under, other)
        logger.debug("tunnelled %r -> %r beneath %r", cell, other, middle)

    @staticmethod
    def _between(grid: "Grid", cell: WeaveCell, other: WeaveCell) -> Optional[WeaveCell]:
        if cell.is_under or other.is_under:
            return None
        drow, dcol = other.row - cell.row, other.col - cell.col
        if (abs(drow), abs(dcol)) not in ((2, 0), (0, 2)):
            return None
        return grid.get(cell.row + drow // 2, cell.col + dcol // 2)

    def __repr__(self) -> str:
        return f"Weave(rows={self.rows}, cols={self.cols}, preconfigured={self.preconfigured})"


__all__ = ["Weave"]
