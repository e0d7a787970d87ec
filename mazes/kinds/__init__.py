"""Grid topologies."""

__all__ = [
    "SquareKind",
    "Regular",
    "Weighted",
    "Masked",
    "Polar",
    "Hex",
    "Triangle",
    "Weave",
]

from .square import SquareKind, Regular, Weighted, Masked
from .polar import Polar
from .hex import Hex
from .triangle import Triangle
from .weave import Weave
