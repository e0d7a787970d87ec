"""Hunt-and-kill: random walks restarted by scanning for the next frontier cell."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..base import AbstractMazeGenerator
from ..grid import Grid

logger = logging.getLogger(__name__)


class HuntAndKill(AbstractMazeGenerator):
    name = "hunt_and_kill"

    def carve(self, grid: Grid) -> None:
        if not grid.size():
            return
        current: Optional[Any] = grid.get_random_cell(self._rng)
        hunts = 0

        while current is not None:
            unvisited = self.unvisited_neighbours(grid, current)
            if unvisited:
                neighbour = self._rng.choice(unvisited)
                grid.link(current, neighbour)
                current = neighbour
            else:
                current = self._hunt(grid)
                hunts += 1

        logger.debug("hunt-and-kill hunted %d times", hunts)

    def _hunt(self, grid: Grid) -> Optional[Any]:
        """Link the first unvisited cell that borders the maze and return it."""

        for cell in grid.cells():
            if grid.links(cell):
                continue
            visited = [neighbour for neighbour in grid.neighbours(cell) if grid.links(neighbour)]
            if visited:
                grid.link(cell, self._rng.choice(visited))
                return cell
        return None


__all__ = ["HuntAndKill"]
