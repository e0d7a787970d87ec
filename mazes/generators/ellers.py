"""Eller's algorithm: one row at a time with per-row set bookkeeping."""

from __future__ import annotations

import logging

from ..base import AbstractMazeGenerator
from ..grid import Grid
from ..kinds import Regular
from ..union_find import DisjointSet

logger = logging.getLogger(__name__)


class Ellers(AbstractMazeGenerator):
    """Join west neighbours from different sets, then drop every set into the next row.

    Each set in a row gets at least one downward link (the first of a shuffled
    member list) plus extra ones with ``extra_down_chance``. The last row joins
    every remaining pair of differing sets, which connects the whole maze.
    """

    name = "ellers"
    supported_kinds = (Regular,)

    def __init__(
        self,
        *,
        join_chance: float = 0.5,
        extra_down_chance: float = 1 / 3,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.join_chance = join_chance
        self.extra_down_chance = extra_down_chance

    def carve(self, grid: Grid) -> None:
        sets = DisjointSet(grid.cells())
        rows = grid.rows()

        for index, row in enumerate(rows):
            last_row = index == len(rows) - 1

            for cell in row:
                west = grid.west(cell)
                if west is None or sets.same_set(cell, west):
                    continue
                if last_row or self._rng.random() < self.join_chance:
                    grid.link(cell, west)
                    sets.union(west, cell)

            if last_row:
                continue

            for members in sets.groups(row):
                self._rng.shuffle(members)
                for position, cell in enumerate(members):
                    if position == 0 or self._rng.random() < self.extra_down_chance:
                        south = grid.south(cell)
                        if south is None:
                            raise RuntimeError(f"{cell!r} has no cell below it")
                        grid.link(cell, south)
                        sets.union(cell, south)

        logger.debug("eller's left %d sets over %d rows", sets.set_count(), len(rows))


__all__ = ["Ellers"]
