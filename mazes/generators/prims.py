"""Prim's algorithm, simplified (random active cell) and true (cost-ordered)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..base import AbstractMazeGenerator
from ..grid import Grid
from .growing_tree import GrowingTree, choose_random

logger = logging.getLogger(__name__)


class SimplifiedPrims(GrowingTree):
    """Growing tree that always picks a uniformly random active cell."""

    name = "simplified_prims"

    def __init__(self, **kwargs) -> None:
        super().__init__(choose=choose_random, **kwargs)


class TruePrims(AbstractMazeGenerator):
    """Expand from the cheapest active cell towards its cheapest unvisited neighbour.

    Costs are drawn once per cell, so this approximates Prim's over edge weights by
    ranking on endpoint cost.
    """

    name = "true_prims"

    def __init__(self, *, max_cost: int = 100, **kwargs) -> None:
        super().__init__(**kwargs)
        self.max_cost = max_cost

    def carve(self, grid: Grid) -> None:
        if not grid.size():
            return
        costs: Dict[Any, int] = {cell: self._rng.randrange(self.max_cost) for cell in grid.cells()}
        active: List[Any] = [grid.get_random_cell(self._rng)]

        while active:
            index = min(range(len(active)), key=lambda i: costs[active[i]])
            cell = active[index]
            unvisited = self.unvisited_neighbours(grid, cell)
            if unvisited:
                neighbour = min(unvisited, key=lambda n: costs.get(n, self.max_cost))
                grid.link(cell, neighbour)
                active.append(neighbour)
            else:
                active[index] = active[-1]
                active.pop()

        logger.debug("true prim's linked %d cells", grid.link_count())


__all__ = ["SimplifiedPrims", "TruePrims"]
