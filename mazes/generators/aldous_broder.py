"""Aldous-Broder: uniform spanning trees from a plain random walk."""

from __future__ import annotations

import logging

from ..base import AbstractMazeGenerator
from ..grid import Grid

logger = logging.getLogger(__name__)


class AldousBroder(AbstractMazeGenerator):
    """Wander at random, linking every first visit back to the cell just left.

    Stops once every cell has been reached. There is no step limit: on a connected
    grid the walk finishes with probability 1.
    """

    name = "aldous_broder"

    def carve(self, grid: Grid) -> None:
        if not grid.size():
            return
        cell = grid.get_random_cell(self._rng)
        unvisited = grid.size() - 1
        steps = 0

        while unvisited > 0:
            neighbours = grid.neighbours(cell)
            if not neighbours:
                raise RuntimeError(f"Random walk is stuck: {cell!r} has no neighbours")
            neighbour = self._rng.choice(neighbours)
            if not grid.links(neighbour):
                grid.link(cell, neighbour)
                unvisited -= 1
            cell = neighbour
            steps += 1

        logger.debug("aldous-broder finished after %d steps", steps)


__all__ = ["AldousBroder"]
