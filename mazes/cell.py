"""Cell identities shared by every grid topology."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cell:
    """A position on a planar grid (square, masked, polar, hex or triangle)."""

    row: int
    col: int

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


@dataclass(frozen=True, order=True)
class WeaveCell:
    """A weave grid position: the surface ("over") cell or the tunnel beneath it."""

    row: int
    col: int
    under: bool = False

    @property
    def is_under(self) -> bool:
        return self.under

    def tunnel(self) -> "WeaveCell":
        """Return the Under twin of this position."""

        return WeaveCell(self.row, self.col, True)

    def surface(self) -> "WeaveCell":
        """Return the Over cell a tunnel runs beneath."""

        return WeaveCell(self.row, self.col, False)

    def __repr__(self) -> str:
        kind = "Under" if self.under else "Over"
        return f"{kind}({self.row}, {self.col})"


__all__ = ["Cell", "WeaveCell"]
