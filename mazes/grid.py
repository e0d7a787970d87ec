"""The link graph of a maze over the cells of a topology."""

from __future__ import annotations

import heapq
import logging
import random
from itertools import count, groupby
from operator import attrgetter
from typing import Any, Iterator, List, Optional, Tuple

import networkx as nx

from .base import Kind
from .cell import WeaveCell
from .distances import Distances

logger = logging.getLogger(__name__)


class Grid:
    """Undirected passages between the cells of a :class:`~mazes.base.Kind`.

    The node set is fixed by ``kind.prepare_grid()`` (weave tunnels aside); generators
    only add or remove edges. ``start`` and ``goal`` drive distance colouring and paths.
    """

    def __init__(
        self,
        kind: Kind,
        *,
        start: Optional[Any] = None,
        goal: Optional[Any] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.kind = kind
        self._links: nx.Graph = kind.prepare_grid()
        self._rng = rng if rng is not None else random.Random()
        self.start = start
        self.goal = goal

    # ------------------------------------------------------------------
    # cells

    @property
    def num_rows(self) -> int:
        return self.kind.num_rows

    @property
    def num_cols(self) -> int:
        return self.kind.num_cols

    @property
    def graph(self) -> nx.Graph:
        """Read-only view of the link graph."""

        return self._links.copy(as_view=True)

    def size(self) -> int:
        return self._links.number_of_nodes()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, cell: object) -> bool:
        return cell in self._links

    def __iter__(self) -> Iterator[Any]:
        return iter(self.cells())

    def cells(self) -> List[Any]:
        return list(self._links.nodes)

    def rows(self) -> List[List[Any]]:
        ordered = sorted(self.cells(), key=attrgetter("row"))
        return [list(row) for _, row in groupby(ordered, key=attrgetter("row"))]

    def get(self, row: int, col: int) -> Optional[Any]:
        cell = self.kind.cell_type(row, col)
        return cell if cell in self._links else None

    def get_random_cell(self, rng: Optional[random.Random] = None) -> Any:
        cells = self.cells()
        if not cells:
            raise ValueError(f"Cannot pick a random cell from an empty grid ({self.kind!r})")
        return (rng or self._rng).choice(cells)

    def north(self, cell: Any) -> Optional[Any]:
        return self.get(cell.row - 1, cell.col)

    def south(self, cell: Any) -> Optional[Any]:
        return self.get(cell.row + 1, cell.col)

    def west(self, cell: Any) -> Optional[Any]:
        return self.get(cell.row, cell.col - 1)

    def east(self, cell: Any) -> Optional[Any]:
        return self.get(cell.row, cell.col + 1)

    def neighbours(self, cell: Any) -> List[Any]:
        return self.kind.neighbours(self, cell)

    def neighbouring_cells(self) -> List[Tuple[Any, Any]]:
        """Every topologically adjacent pair of cells, each pair once."""

        seen = set()
        pairs: List[Tuple[Any, Any]] = []
        for cell in self.cells():
            for neighbour in self.neighbours(cell):
                key = frozenset((cell, neighbour))
                if key not in seen:
                    seen.add(key)
                    pairs.append((cell, neighbour))
        return pairs

    # ------------------------------------------------------------------
    # links

    def link(self, cell: Any, other: Any) -> None:
        self.kind.interpret_link(self, cell, other)

    def connect(self, cell: Any, other: Any) -> None:
        """Insert a plain edge, bypassing the topology's link interpretation."""

        for endpoint in (cell, other):
            if endpoint not in self._links:
                raise KeyError(f"{endpoint!r} is not a cell of this grid")
        self._links.add_edge(cell, other)

    def unlink(self, cell: Any, other: Any) -> None:
        if self._links.has_edge(cell, other):
            self._links.remove_edge(cell, other)

    def links(self, cell: Any) -> List[Any]:
        try:
            return list(self._links.adj[cell])
        except KeyError as exc:
            raise KeyError(f"{cell!r} is not a cell of this grid") from exc

    def are_linked(self, cell: Any, other: Any) -> bool:
        return self._links.has_edge(cell, other)

    def link_count(self) -> int:
        return self._links.number_of_edges()

    def dead_ends(self) -> List[Any]:
        return [cell for cell, degree in self._links.degree() if degree == 1]

    def braid(self, p: float = 1.0, rng: Optional[random.Random] = None) -> int:
        """Join dead ends to a neighbour with probability ``p``; return the links added.

        Dead ends are snapshotted and shuffled first. Another dead end is preferred as
        the partner, so one new link can remove two dead ends at once.
        """

        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Braid probability must be within [0, 1], got {p}")
        rng = rng or self._rng

        dead_ends = self.dead_ends()
        rng.shuffle(dead_ends)

        added = 0
        for cell in dead_ends:
            linked = self.links(cell)
            if len(linked) != 1 or rng.random() >= p:
                continue
            candidates = [n for n in self.neighbours(cell) if n not in linked]
            if not candidates:
                continue
            best = [n for n in candidates if len(self.links(n)) == 1] or candidates
            self.link(cell, rng.choice(best))
            added += 1

        logger.debug("braided %d of %d dead ends (p=%.2f)", added, len(dead_ends), p)
        return added

    # ------------------------------------------------------------------
    # weights and tunnels

    @property
    def is_weighted(self) -> bool:
        return self.kind.weighted

    def weight(self, cell: Any) -> int:
        try:
            return self._links.nodes[cell].get("weight", 1)
        except KeyError as exc:
            raise KeyError(f"{cell!r} is not a cell of this grid") from exc

    def set_weight(self, cell: Any, weight: int) -> None:
        if not self.is_weighted:
            raise TypeError(f"{type(self.kind).__name__} grids do not carry cell weights")
        if weight < 1:
            raise ValueError(f"Cell weights must be at least 1, got {weight}")
        if cell not in self._links:
            raise KeyError(f"{cell!r} is not a cell of this grid")
        self._links.nodes[cell]["weight"] = int(weight)

    def tunnel_under(self, over: Any) -> WeaveCell:
        """Add the Under twin of ``over`` and return it; the caller links its two ends."""

        if not isinstance(over, WeaveCell) or over.is_under:
            raise RuntimeError(f"Tunnels can only run beneath Over cells, got {over!r}")
        if over not in self._links:
            raise KeyError(f"{over!r} is not a cell of this grid")
        under = over.tunnel()
        if under in self._links:
            raise RuntimeError(f"{over!r} already has a tunnel beneath it")
        self._links.add_node(under)
        return under

    # ------------------------------------------------------------------
    # distances

    def set_start(self, cell: Any) -> None:
        self.start = cell

    def set_goal(self, cell: Any) -> None:
        self.goal = cell

    def distances_from(self, root: Any) -> Distances:
        if root not in self._links:
            raise KeyError(f"{root!r} is not a cell of this grid")
        if self.is_weighted:
            return self._weighted_distances_from(root)

        distances = Distances(root)
        frontier = [root]
        while frontier:
            new_frontier = []
            for cell in frontier:
                for linked in self._links.adj[cell]:
                    if linked not in distances:
                        distances[linked] = distances[cell] + 1
                        new_frontier.append(linked)
            frontier = new_frontier
        return distances

    def _weighted_distances_from(self, root: Any) -> Distances:
        distances = Distances(root)
        tie = count()
        pending: List[Tuple[int, int, Any]] = [(0, next(tie), root)]
        while pending:
            distance, _, cell = heapq.heappop(pending)
            if distance > distances[cell]:
                continue
            for linked in self._links.adj[cell]:
                total = distance + self.weight(linked)
                previous = distances.get(linked)
                if previous is None or total < previous:
                    distances[linked] = total
                    heapq.heappush(pending, (total, next(tie), linked))
        return distances

    def distances(self) -> Optional[Distances]:
        """Distances for display: none, from start or goal, or the start-to-goal path."""

        if self.start is None and self.goal is None:
            return None
        if self.start is None or self.goal is None:
            return self.distances_from(self.start if self.start is not None else self.goal)
        return self.distances_from(self.start).path_to(self.goal, self)

    def longest_path(self) -> Distances:
        """The path between the two ends of the maze's diameter."""

        if not self.size():
            raise ValueError("Cannot find the longest path of an empty grid")
        first = self.start if self.start is not None else self.cells()[0]
        start, _ = self.distances_from(first).max()
        distances = self.distances_from(start)
        goal, _ = distances.max()
        return distances.path_to(goal, self)

    def __str__(self) -> str:
        from .render.ascii import render_ascii

        return render_ascii(self)

    def __repr__(self) -> str:
        return f"Grid({self.kind!r}, cells={self.size()}, links={self.link_count()})"


__all__ = ["Grid"]
