"""Abstract interfaces for grid topologies and maze generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional, Tuple, Type

import networkx as nx

if TYPE_CHECKING:
    from .grid import Grid


class Kind(ABC):
    """Structural policy of a grid: which cells exist and which are adjacent.

    A kind holds its dimensions only. Link state lives in the :class:`~mazes.grid.Grid`
    built over it, which is passed back in whenever adjacency depends on it.
    """

    cell_type: Type[Any]
    weighted = False

    @property
    @abstractmethod
    def num_rows(self) -> int:
        """Number of rows the cell set spans."""

    @property
    @abstractmethod
    def num_cols(self) -> int:
        """Widest row of the cell set."""

    @abstractmethod
    def prepare_grid(self) -> nx.Graph:
        """Return the initial, edge-less link graph holding every cell."""

    @abstractmethod
    def neighbours(self, grid: "Grid", cell: Any) -> List[Any]:
        """Return the cells topologically adjacent to ``cell``, linked or not."""

    def interpret_link(self, grid: "Grid", cell: Any, other: Any) -> None:
        """Turn a generic link request into edges of the link graph."""

        grid.connect(cell, other)

    def next_in_row(self, grid: "Grid", cell: Any) -> Optional[Any]:
        """Cell following ``cell`` along its row, used by row-based generators."""

        return grid.east(cell)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.num_rows}, cols={self.num_cols})"


def check_dimensions(rows: int, cols: int) -> Tuple[int, int]:
    if rows < 0 or cols < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
    return int(rows), int(cols)


class AbstractMazeGenerator(ABC):
    """Base class for algorithms that carve passages into a link-free grid."""

    name = "abstract"
    supported_kinds: Tuple[Type[Kind], ...] = ()

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def generate(self, grid: "Grid") -> "Grid":
        """Populate ``grid`` with passages and return it."""

        self.check_kind(grid)
        self.carve(grid)
        return grid

    def check_kind(self, grid: "Grid") -> None:
        if self.supported_kinds and not isinstance(grid.kind, self.supported_kinds):
            allowed = ", ".join(kind.__name__ for kind in self.supported_kinds)
            raise TypeError(
                f"{type(self).__name__} does not support {type(grid.kind).__name__} grids "
                f"(supported: {allowed})"
            )

    @abstractmethod
    def carve(self, grid: "Grid") -> None:
        """Link cells of ``grid`` in place."""

    def unvisited_neighbours(self, grid: "Grid", cell: Any) -> List[Any]:
        return [neighbour for neighbour in grid.neighbours(cell) if not grid.links(neighbour)]


__all__ = [
    "Kind",
    "AbstractMazeGenerator",
    "check_dimensions",
]
