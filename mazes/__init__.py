"""Maze generation, analysis and rendering over several grid topologies."""

__all__ = [
    "Kind",
    "AbstractMazeGenerator",
    "Cell",
    "WeaveCell",
    "Grid",
    "Distances",
    "DisjointSet",
    "Mask",
    "Regular",
    "Weighted",
    "Masked",
    "Polar",
    "Hex",
    "Triangle",
    "Weave",
    "GENERATORS",
]

from .base import Kind, AbstractMazeGenerator
from .cell import Cell, WeaveCell
from .distances import Distances
from .grid import Grid
from .mask import Mask
from .union_find import DisjointSet
from .kinds import Regular, Weighted, Masked, Polar, Hex, Triangle, Weave
from .generators import GENERATORS
