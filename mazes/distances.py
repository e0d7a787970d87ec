"""Shortest distances from a root cell over the passages of a maze."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from .grid import Grid


class Distances:
    """Mapping from cell to its distance from ``root`` (the root is always 0)."""

    def __init__(self, root: Any) -> None:
        self.root = root
        self._cells: Dict[Any, int] = {root: 0}

    def __getitem__(self, cell: Any) -> int:
        try:
            return self._cells[cell]
        except KeyError as exc:
            raise KeyError(f"{cell!r} has no recorded distance from {self.root!r}") from exc

    def __setitem__(self, cell: Any, distance: int) -> None:
        if distance < 0:
            raise ValueError(f"Distances must be non-negative, got {distance} for {cell!r}")
        self._cells[cell] = distance

    def get(self, cell: Any, default: Optional[int] = None) -> Optional[int]:
        return self._cells.get(cell, default)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[Any]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def cells(self) -> List[Any]:
        return list(self._cells)

    def items(self) -> List[Tuple[Any, int]]:
        return list(self._cells.items())

    def path_to(self, goal: Any, grid: "Grid") -> "Distances":
        """Walk back from ``goal`` to the root, keeping only the cells on the way.

        Each step prefers the linked neighbour the cheapest route came through
        (its distance plus the weight of the current cell), then any neighbour with a
        strictly smaller distance. A cell with neither means these distances do not
        belong to ``grid``.
        """

        current = goal
        breadcrumbs = Distances(self.root)
        breadcrumbs[current] = self[current]

        while current != self.root:
            previous = self._step_back(current, grid)
            if previous is None:
                raise RuntimeError(
                    f"No linked neighbour of {current!r} is closer to {self.root!r}; "
                    "distances are inconsistent with the grid"
                )
            breadcrumbs[previous] = self._cells[previous]
            current = previous

        return breadcrumbs

    def _step_back(self, current: Any, grid: "Grid") -> Optional[Any]:
        here = self._cells[current]
        closer = [
            linked
            for linked in grid.links(current)
            if self._cells.get(linked) is not None and self._cells[linked] < here
        ]
        cost = grid.weight(current)
        for linked in closer:
            if self._cells[linked] + cost == here:
                return linked
        return closer[0] if closer else None

    def max(self) -> Tuple[Any, int]:
        """Return the farthest cell and its distance (the first one found on ties)."""

        max_cell, max_distance = self.root, 0
        for cell, distance in self._cells.items():
            if distance > max_distance:
                max_cell, max_distance = cell, distance
        return max_cell, max_distance

    def __repr__(self) -> str:
        return f"Distances(root={self.root!r}, cells={len(self._cells)})"


__all__ = ["Distances"]
