"""Wilson's algorithm: uniform spanning trees from loop-erased random walks."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..base import AbstractMazeGenerator
from ..grid import Grid

logger = logging.getLogger(__name__)


class Wilsons(AbstractMazeGenerator):
    """Grow a tree by walking from unvisited cells until the walk hits the tree.

    Whenever the walk crosses its own path the loop is erased, so only the
    loop-free route is carved into the maze.
    """

    name = "wilsons"

    def carve(self, grid: Grid) -> None:
        unvisited: Dict[Any, None] = dict.fromkeys(grid.cells())
        if not unvisited:
            return
        del unvisited[self._rng.choice(list(unvisited))]
        walks = 0

        while unvisited:
            cell = self._rng.choice(list(unvisited))
            path: List[Any] = [cell]

            while cell in unvisited:
                neighbours = grid.neighbours(cell)
                if not neighbours:
                    raise RuntimeError(f"Random walk is stuck: {cell!r} has no neighbours")
                cell = self._rng.choice(neighbours)
                if cell in path:
                    del path[path.index(cell) + 1:]
                else:
                    path.append(cell)

            # join from the tree end backwards; a tunnel hop can be invalidated by
            # the link made just before it, which leaves the rest for a later walk
            for current, following in reversed(list(zip(path, path[1:]))):
                if following not in grid.neighbours(current):
                    break
                grid.link(current, following)
                del unvisited[current]
            walks += 1

        logger.debug("wilson's joined the tree with %d walks", walks)


__all__ = ["Wilsons"]
