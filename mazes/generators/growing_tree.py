"""Growing tree: an active list expanded by a pluggable selection strategy."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, List, Sequence

from ..base import AbstractMazeGenerator
from ..grid import Grid

logger = logging.getLogger(__name__)

Chooser = Callable[[Sequence[Any], random.Random], Any]


def choose_last(active: Sequence[Any], rng: random.Random) -> Any:
    """Most recent cell first: behaves like the recursive backtracker."""

    return active[-1]


def choose_random(active: Sequence[Any], rng: random.Random) -> Any:
    """Any active cell with equal weight: behaves like simplified Prim's."""

    return rng.choice(active)


def choose_mixed(active: Sequence[Any], rng: random.Random) -> Any:
    return active[-1] if rng.random() < 0.5 else rng.choice(active)


CHOOSERS = {
    "last": choose_last,
    "random": choose_random,
    "mixed": choose_mixed,
}


class GrowingTree(AbstractMazeGenerator):
    """Repeatedly extend the maze from an active cell picked by ``choose``.

    A chosen cell without unvisited neighbours leaves the active list; removal
    swaps in the last element, so list order is not preserved.
    """

    name = "growing_tree"

    def __init__(self, *, choose: Chooser = choose_random, **kwargs) -> None:
        super().__init__(**kwargs)
        self.choose = choose

    def carve(self, grid: Grid) -> None:
        if not grid.size():
            return
        active: List[Any] = [grid.get_random_cell(self._rng)]
        expansions = 0

        while active:
            cell = self.choose(active, self._rng)
            unvisited = self.unvisited_neighbours(grid, cell)
            if unvisited:
                neighbour = self._rng.choice(unvisited)
                grid.link(cell, neighbour)
                active.append(neighbour)
                expansions += 1
            else:
                index = active.index(cell)
                active[index] = active[-1]
                active.pop()

        logger.debug("%s expanded %d times", self.name, expansions)


__all__ = [
    "GrowingTree",
    "Chooser",
    "CHOOSERS",
    "choose_last",
    "choose_random",
    "choose_mixed",
]
