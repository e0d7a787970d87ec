"""Binary tree: every cell opens north or east."""

from __future__ import annotations

import logging

from ..base import AbstractMazeGenerator
from ..grid import Grid
from ..kinds import Hex, Regular

logger = logging.getLogger(__name__)


class BinaryTree(AbstractMazeGenerator):
    """Link each cell to its north or next-in-row neighbour, chosen at random.

    Visits cells in enumeration order. The corner with neither neighbour stays the
    root, which leaves the top row and the last column as unbroken corridors.
    """

    name = "binary_tree"
    supported_kinds = (Regular, Hex)

    def carve(self, grid: Grid) -> None:
        linked = 0
        for cell in grid.cells():
            candidates = [
                neighbour
                for neighbour in (grid.north(cell), grid.kind.next_in_row(grid, cell))
                if neighbour is not None
            ]
            if candidates:
                grid.link(cell, self._rng.choice(candidates))
                linked += 1
        logger.debug("binary tree linked %d of %d cells", linked, grid.size())


__all__ = ["BinaryTree"]
