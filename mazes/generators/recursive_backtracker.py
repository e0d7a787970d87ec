"""Recursive backtracker: depth-first search on an explicit stack."""

from __future__ import annotations

import logging
from typing import Any, List

from ..base import AbstractMazeGenerator
from ..grid import Grid

logger = logging.getLogger(__name__)


class RecursiveBacktracker(AbstractMazeGenerator):
    name = "recursive_backtracker"

    def carve(self, grid: Grid) -> None:
        if not grid.size():
            return
        stack: List[Any] = [grid.get_random_cell(self._rng)]
        deepest = 1

        while stack:
            current = stack[-1]
            unvisited = self.unvisited_neighbours(grid, current)
            if unvisited:
                neighbour = self._rng.choice(unvisited)
                grid.link(current, neighbour)
                stack.append(neighbour)
                deepest = max(deepest, len(stack))
            else:
                stack.pop()

        logger.debug("recursive backtracker reached depth %d", deepest)


__all__ = ["RecursiveBacktracker"]
