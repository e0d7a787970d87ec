"""Kruskal's algorithm over shuffled neighbour pairs, with a weave-aware variant."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from ..base import AbstractMazeGenerator
from ..cell import WeaveCell
from ..grid import Grid
from ..kinds import Weave
from ..union_find import DisjointSet

logger = logging.getLogger(__name__)

Pair = Tuple[Any, Any]


class Kruskals(AbstractMazeGenerator):
    """Link shuffled neighbour pairs whenever they join two different sets."""

    name = "kruskals"

    def carve(self, grid: Grid) -> None:
        sets = DisjointSet(grid.cells())
        pairs = grid.neighbouring_cells()
        self._link_pairs(grid, sets, pairs)

    def _link_pairs(self, grid: Grid, sets: DisjointSet, pairs: List[Pair]) -> None:
        self._rng.shuffle(pairs)
        merged = 0
        for left, right in pairs:
            if not sets.same_set(left, right):
                self._merge(grid, sets, left, right)
                merged += 1
        logger.debug("%s merged %d of %d pairs", self.name, merged, len(pairs))

    @staticmethod
    def _merge(grid: Grid, sets: DisjointSet, left: Any, right: Any) -> None:
        grid.link(left, right)
        sets.union(left, right)


class KruskalsWeave(Kruskals):
    """Kruskal's on a weave grid that seeds crossings before the random pass.

    A crossing needs an unlinked interior cell whose four neighbours all belong to
    different sets. One straight passage runs through the cell and the other runs
    through a tunnel beneath it. ``crossings`` attempts are made (default: one per cell).
    """

    name = "kruskals_weave"
    supported_kinds = (Weave,)

    def __init__(self, *, crossings: Optional[int] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.crossings = crossings

    def carve(self, grid: Grid) -> None:
        grid.kind.preconfigured = True
        sets = DisjointSet(grid.cells())
        pairs = grid.neighbouring_cells()

        placed = 0
        if grid.num_rows >= 3 and grid.num_cols >= 3:
            attempts = self.crossings if self.crossings is not None else grid.size()
            for _ in range(attempts):
                cell = WeaveCell(
                    self._rng.randint(1, grid.num_rows - 2),
                    self._rng.randint(1, grid.num_cols - 2),
                )
                if self.add_crossing(grid, sets, pairs, cell):
                    placed += 1
        logger.debug("placed %d crossings", placed)

        self._link_pairs(grid, sets, pairs)

    def add_crossing(self, grid: Grid, sets: DisjointSet, pairs: List[Pair], cell: WeaveCell) -> bool:
        if cell not in grid or grid.links(cell):
            return False
        north, south = grid.north(cell), grid.south(cell)
        west, east = grid.west(cell), grid.east(cell)
        ends = (north, south, west, east)
        if any(end is None for end in ends):
            return False
        if len({sets.find(end) for end in ends}) < len(ends):
            return False

        pairs[:] = [pair for pair in pairs if cell not in pair]

        if self._rng.random() < 0.5:
            through, beneath = (west, east), (north, south)
        else:
            through, beneath = (north, south), (west, east)

        self._merge(grid, sets, through[0], cell)
        self._merge(grid, sets, cell, through[1])
        under = grid.tunnel_under(cell)
        self._merge(grid, sets, beneath[0], under)
        self._merge(grid, sets, under, beneath[1])
        return True


__all__ = ["Kruskals", "KruskalsWeave"]
