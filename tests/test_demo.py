import argparse
import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from PIL import Image

from mazes import Grid, Masked, Polar, Regular, Weave
from mazes.demo import build_generator, build_kind, main, run
from mazes.generators import GrowingTree, choose_last


class DemoTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def _main(self, *argv: str) -> str:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main(list(argv))
        return buffer.getvalue()

    def test_png_output_path_is_printed(self) -> None:
        output = self.dir / "maze.png"
        printed = self._main("recursive_backtracker", "--rows", "5", "--cols", "6", "--seed", "1", "--output", str(output))
        self.assertEqual(printed.strip(), str(output))
        with Image.open(output) as image:
            self.assertEqual(image.size, (151, 126))

    def test_ascii_output(self) -> None:
        printed = self._main("sidewinder", "--rows", "3", "--cols", "4", "--seed", "2", "--ascii")
        lines = printed.splitlines()
        self.assertEqual(lines[0], "┌───────────────┐")
        self.assertEqual(len(lines), 7)
        self.assertTrue(printed.endswith("┘\n"))

    def test_weave_with_braid_and_longest_path(self) -> None:
        output = self.dir / "weave.png"
        self._main(
            "kruskals_weave",
            "--kind", "weave",
            "--rows", "8",
            "--cols", "8",
            "--braid", "0.5",
            "--longest-path",
            "--seed", "3",
            "--output", str(output),
        )
        self.assertTrue(output.exists())

    def test_polar_colorized(self) -> None:
        output = self.dir / "polar.png"
        self._main("wilsons", "--kind", "polar", "--rows", "5", "--colorize", "--seed", "4", "--output", str(output))
        self.assertTrue(output.exists())

    def test_text_mask(self) -> None:
        mask_path = self.dir / "mask.txt"
        mask_path.write_text("X...\n....\n...X\n", encoding="utf-8")
        args = argparse.Namespace(
            algorithm="hunt_and_kill",
            kind=None,
            rows=20,
            cols=20,
            mask=mask_path,
            braid=0.0,
            choose="random",
            longest_path=False,
            colorize=False,
            seed=5,
        )
        grid = run(args)
        self.assertEqual(grid.size(), 10)
        self.assertEqual(grid.link_count(), 9)
        self.assertIsInstance(grid.kind, Masked)

    def test_mask_with_another_kind_is_rejected(self) -> None:
        mask_path = self.dir / "mask.txt"
        mask_path.write_text("...\n...\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            self._main("wilsons", "--kind", "polar", "--mask", str(mask_path))
        printed = self._main("wilsons", "--kind", "masked", "--mask", str(mask_path), "--ascii", "--seed", "1")
        self.assertEqual(len(printed.splitlines()), 5)

    def test_builders(self) -> None:
        self.assertIsInstance(build_kind("polar", 4, 99), Polar)
        self.assertIsInstance(build_kind("weave", 3, 3), Weave)
        with self.assertRaises(ValueError):
            build_kind("masked", 3, 3)
        with self.assertRaises(ValueError):
            build_kind("polar", 3, 3, self.dir / "unused.txt")
        self.assertIsInstance(build_kind(None, 3, 3), Regular)
        with self.assertRaises(ValueError):
            build_kind("cube", 3, 3)

        generator = build_generator("growing_tree", rng=None, choose="last")
        self.assertIsInstance(generator, GrowingTree)
        self.assertIs(generator.choose, choose_last)
        with self.assertRaises(ValueError):
            build_generator("labyrinth", rng=None)

    def test_unsupported_topology_surfaces(self) -> None:
        with self.assertRaises(TypeError):
            build_generator("sidewinder", rng=None).generate(Grid(build_kind("polar", 3, 3)))


if __name__ == "__main__":
    unittest.main()
