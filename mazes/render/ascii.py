"""Box-drawing text rendering for square grids."""

from __future__ import annotations

from typing import Any, Optional

from ..grid import Grid
from ..kinds import SquareKind

# (north, south, west, east) arm is open -> connector drawn at a wall corner
CONNECTORS = {
    (False, True, True, True): "╵",
    (True, False, True, True): "╷",
    (True, True, False, True): "╴",
    (True, True, True, False): "╶",
    (True, False, False, False): "┬",
    (False, True, False, False): "┴",
    (False, False, True, False): "├",
    (False, False, False, True): "┤",
    (True, True, False, False): "─",
    (True, False, True, False): "┌",
    (True, False, False, True): "┐",
    (False, True, True, False): "└",
    (False, True, False, True): "┘",
    (False, False, True, True): "│",
    (False, False, False, False): "┼",
    (True, True, True, True): " ",
}


def render_ascii(grid: Grid) -> str:
    """Draw ``grid`` with box-drawing walls; distances fill the cells when available."""

    if not isinstance(grid.kind, SquareKind):
        raise TypeError(f"ASCII rendering supports square grids only, not {type(grid.kind).__name__}")

    def open_between(cell: Optional[Any], other: Optional[Any]) -> bool:
        if cell is None and other is None:
            return True
        if cell is None or other is None:
            return False
        return grid.are_linked(cell, other)

    def connector_at(row: int, col: int) -> str:
        key = (
            open_between(grid.get(row - 1, col - 1), grid.get(row - 1, col)),
            open_between(grid.get(row, col - 1), grid.get(row, col)),
            open_between(grid.get(row - 1, col - 1), grid.get(row, col - 1)),
            open_between(grid.get(row - 1, col), grid.get(row, col)),
        )
        return CONNECTORS[key]

    distances = grid.distances()
    rows, cols = grid.num_rows, grid.num_cols

    lines = [
        connector_at(0, 0)
        + "".join(
            ("   " if open_between(None, grid.get(0, col)) else "───") + connector_at(0, col + 1)
            for col in range(cols)
        )
    ]
    for row in range(rows):
        top = " " if open_between(None, grid.get(row, 0)) else "│"
        bottom = connector_at(row + 1, 0)
        for col in range(cols):
            cell = grid.get(row, col)
            distance = distances.get(cell) if distances is not None and cell is not None else None
            top += f"{distance:>3}" if distance is not None else "   "
            top += " " if open_between(cell, grid.get(row, col + 1)) else "│"
            bottom += "   " if open_between(cell, grid.get(row + 1, col)) else "───"
            bottom += connector_at(row + 1, col + 1)
        lines.append(top)
        lines.append(bottom)

    return "\n".join(lines) + "\n"


__all__ = ["render_ascii"]
