"""Maze generation algorithms."""

__all__ = [
    "GENERATORS",
    "AldousBroder",
    "BinaryTree",
    "Ellers",
    "GrowingTree",
    "HuntAndKill",
    "Kruskals",
    "KruskalsWeave",
    "RecursiveBacktracker",
    "RecursiveDivision",
    "Sidewinder",
    "SimplifiedPrims",
    "TruePrims",
    "Wilsons",
    "CHOOSERS",
    "choose_last",
    "choose_random",
    "choose_mixed",
]

from .aldous_broder import AldousBroder
from .binary_tree import BinaryTree
from .ellers import Ellers
from .growing_tree import CHOOSERS, GrowingTree, choose_last, choose_mixed, choose_random
from .hunt_and_kill import HuntAndKill
from .kruskals import Kruskals, KruskalsWeave
from .prims import SimplifiedPrims, TruePrims
from .recursive_backtracker import RecursiveBacktracker
from .recursive_division import RecursiveDivision
from .sidewinder import Sidewinder
from .wilsons import Wilsons

GENERATORS = {
    generator.name: generator
    for generator in (
        BinaryTree,
        Sidewinder,
        AldousBroder,
        Wilsons,
        HuntAndKill,
        RecursiveBacktracker,
        RecursiveDivision,
        GrowingTree,
        SimplifiedPrims,
        TruePrims,
        Ellers,
        Kruskals,
        KruskalsWeave,
    )
}
