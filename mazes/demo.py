"""Command line for generating, braiding and rendering a single maze."""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional

from .base import AbstractMazeGenerator, Kind
from .generators import CHOOSERS, GENERATORS, GrowingTree
from .grid import Grid
from .kinds import Hex, Masked, Polar, Regular, Triangle, Weave, Weighted
from .mask import Mask
from .render import render_ascii, save_png

logger = logging.getLogger(__name__)

KINDS = ("regular", "weighted", "masked", "polar", "hex", "triangle", "weave")
IMAGE_SUFFIXES = (".png", ".bmp", ".gif", ".jpg", ".jpeg")


def load_mask(path: Path) -> Mask:
    if path.suffix.lower() in IMAGE_SUFFIXES:
        return Mask.from_image(path)
    return Mask.from_txt(path)


def build_kind(name: Optional[str], rows: int, cols: int, mask_path: Optional[Path] = None) -> Kind:
    """Build the topology named ``name``; a mask alone implies a masked grid."""

    if mask_path is not None:
        if name not in (None, "masked"):
            raise ValueError(f"--mask only applies to masked grids, not {name}")
        return Masked(load_mask(mask_path))
    if name == "masked":
        raise ValueError("--mask is required for masked grids")
    if name is None:
        name = "regular"
    if name == "regular":
        return Regular(rows, cols)
    if name == "weighted":
        return Weighted(rows, cols)
    if name == "polar":
        return Polar(rows)
    if name == "hex":
        return Hex(rows, cols)
    if name == "triangle":
        return Triangle(rows, cols)
    if name == "weave":
        return Weave(rows, cols)
    raise ValueError(f"Unknown grid kind: {name}")


def build_generator(name: str, rng: random.Random, choose: str = "random") -> AbstractMazeGenerator:
    try:
        generator_cls = GENERATORS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown algorithm: {name}") from exc
    if generator_cls is GrowingTree:
        return GrowingTree(choose=CHOOSERS[choose], rng=rng)
    return generator_cls(rng=rng)


def run(args: argparse.Namespace) -> Grid:
    rng = random.Random(args.seed)
    kind = build_kind(args.kind, args.rows, args.cols, args.mask)
    grid = Grid(kind, rng=rng)
    generator = build_generator(args.algorithm, rng, args.choose)

    logger.info("generating %r with %s", kind, generator.name)
    generator.generate(grid)
    if args.braid > 0:
        added = grid.braid(args.braid)
        logger.info("braiding added %d links", added)

    if args.longest_path:
        path = grid.longest_path()
        grid.set_start(path.root)
        grid.set_goal(path.max()[0])
        logger.info("longest path runs %d steps", path.max()[1])
    elif args.colorize:
        grid.set_start(grid.get_random_cell())

    logger.info("%d dead ends in %d cells", len(grid.dead_ends()), grid.size())
    return grid


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and render a maze")
    parser.add_argument("algorithm", choices=sorted(GENERATORS), help="Generation algorithm")
    parser.add_argument(
        "--kind", choices=KINDS, default=None, help="Grid topology (default: regular, or masked with --mask)"
    )
    parser.add_argument("--rows", type=int, default=20)
    parser.add_argument("--cols", type=int, default=20)
    parser.add_argument("--mask", type=Path, default=None, help="Text or image mask for a masked grid")
    parser.add_argument("--braid", type=float, default=0.0, help="Probability of removing each dead end")
    parser.add_argument("--choose", choices=sorted(CHOOSERS), default="random", help="Growing tree strategy")
    parser.add_argument("--output", type=Path, default=None, help="Write a PNG rendering here")
    parser.add_argument("--cell-size", type=int, default=25)
    parser.add_argument("--inset", type=float, default=0.0, help="Passage inset as a fraction of the cell size")
    parser.add_argument("--ascii", action="store_true", help="Print the maze as text (square grids)")
    parser.add_argument("--colorize", action="store_true", help="Colour by distance from a random cell")
    parser.add_argument("--longest-path", action="store_true", help="Mark the longest path in the maze")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    grid = run(args)
    if args.ascii:
        print(render_ascii(grid), end="")
    if args.output is not None:
        destination = save_png(grid, args.output, cell_size=args.cell_size, inset=args.inset)
        print(destination)


if __name__ == "__main__":
    main()
