#!/usr/bin/env python3
"""Compare the average number of dead ends each algorithm leaves in a square maze."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mazes import GENERATORS, Grid, Regular

DEFAULT_ALGORITHMS = [
    "binary_tree",
    "sidewinder",
    "aldous_broder",
    "wilsons",
    "hunt_and_kill",
    "recursive_backtracker",
    "recursive_division",
    "growing_tree",
    "simplified_prims",
    "true_prims",
    "ellers",
    "kruskals",
]


def average_dead_ends(name: str, size: int, tries: int, rng: random.Random) -> float:
    counts: List[int] = []
    for _ in range(tries):
        grid = Grid(Regular(size, size), rng=rng)
        GENERATORS[name](rng=rng).generate(grid)
        counts.append(len(grid.dead_ends()))
    return sum(counts) / len(counts)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=20, help="Rows and columns of each maze")
    parser.add_argument("--tries", type=int, default=100, help="Mazes generated per algorithm")
    parser.add_argument("--algorithms", nargs="*", default=DEFAULT_ALGORITHMS, choices=sorted(GENERATORS))
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--json", type=Path, default=None, help="Optional path for the averages as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    averages: Dict[str, float] = {}
    for name in args.algorithms:
        print(f"running {name}")
        averages[name] = average_dead_ends(name, args.size, args.tries, rng)

    total_cells = args.size * args.size
    print(f"\nAverage dead-ends per {args.size}x{args.size} maze ({total_cells} cells):")
    for name, average in sorted(averages.items(), key=lambda item: item[1], reverse=True):
        percentage = average * 100.0 / total_cells
        print(f"{name:>22} : {average:>5.1f}/{total_cells} ({percentage:.1f}%)")

    if args.json is not None:
        args.json.parent.mkdir(parents=True, exist_ok=True)
        args.json.write_text(json.dumps(averages, indent=2), encoding="utf-8")


if __name__ == "__main__":
    main()
