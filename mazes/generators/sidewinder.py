"""Sidewinder: row-wise runs that each break north once."""

from __future__ import annotations

import logging
from typing import Any, List

from ..base import AbstractMazeGenerator
from ..grid import Grid
from ..kinds import Hex, Regular

logger = logging.getLogger(__name__)


class Sidewinder(AbstractMazeGenerator):
    """Carve eastward runs, closing each by opening one random member northward."""

    name = "sidewinder"
    supported_kinds = (Regular, Hex)

    def __init__(self, *, close_chance: float = 0.5, **kwargs) -> None:
        super().__init__(**kwargs)
        self.close_chance = close_chance

    def carve(self, grid: Grid) -> None:
        runs = 0
        for row in grid.rows():
            run: List[Any] = []
            for cell in row:
                run.append(cell)

                east = grid.kind.next_in_row(grid, cell)
                at_east_boundary = east is None
                at_north_boundary = grid.north(cell) is None
                should_close = at_east_boundary or (
                    not at_north_boundary and self._rng.random() < self.close_chance
                )

                if should_close:
                    member = self._rng.choice(run)
                    north = grid.north(member)
                    if north is not None:
                        grid.link(member, north)
                    run.clear()
                    runs += 1
                else:
                    grid.link(cell, east)
        logger.debug("sidewinder closed %d runs", runs)


__all__ = ["Sidewinder"]
