import tempfile
import unittest
from pathlib import Path
from unittest import mock

from PIL import Image

from mazes import Cell, Distances, Grid, Hex, Polar, Regular, Triangle, Weave
from mazes.generators import KruskalsWeave, RecursiveBacktracker
from mazes.render import render_ascii, render_png, save_png
from mazes.render.image import background_for


class AsciiRenderTests(unittest.TestCase):
    def test_closed_cells(self) -> None:
        grid = Grid(Regular(1, 2))
        self.assertEqual(render_ascii(grid), "┌───┬───┐\n│   │   │\n└───┴───┘\n")

    def test_linked_cells(self) -> None:
        grid = Grid(Regular(1, 2))
        grid.link(Cell(0, 0), Cell(0, 1))
        self.assertEqual(render_ascii(grid), "┌───────┐\n│       │\n└───────┘\n")
        self.assertEqual(str(grid), render_ascii(grid))

    def test_vertical_passage(self) -> None:
        grid = Grid(Regular(2, 1))
        grid.link(Cell(0, 0), Cell(1, 0))
        self.assertEqual(render_ascii(grid), "┌───┐\n│   │\n│   │\n│   │\n└───┘\n")

    def test_distances_fill_cells(self) -> None:
        grid = Grid(Regular(1, 2))
        grid.link(Cell(0, 0), Cell(0, 1))
        grid.set_start(Cell(0, 0))
        self.assertEqual(render_ascii(grid).splitlines()[1], "│  0   1│")

    def test_generated_maze_has_one_line_per_wall_row(self) -> None:
        grid = RecursiveBacktracker(seed=4).generate(Grid(Regular(5, 7)))
        lines = render_ascii(grid).splitlines()
        self.assertEqual(len(lines), 11)
        self.assertTrue(all(len(line) == 29 for line in lines))

    def test_other_topologies_are_rejected(self) -> None:
        with self.assertRaises(TypeError):
            render_ascii(Grid(Polar(3)))


class PngRenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_square_image_size_and_walls(self) -> None:
        grid = Grid(Regular(1, 2))
        image = render_png(grid, cell_size=10)
        self.assertEqual(image.size, (21, 11))
        self.assertEqual(image.getpixel((10, 5)), (0, 0, 0))

        grid.link(Cell(0, 0), Cell(0, 1))
        image = render_png(grid, cell_size=10)
        self.assertEqual(image.getpixel((10, 5)), (255, 255, 255))

    def test_distance_colouring(self) -> None:
        grid = Grid(Regular(1, 2))
        grid.link(Cell(0, 0), Cell(0, 1))
        grid.set_start(Cell(0, 0))
        image = render_png(grid, cell_size=10)
        self.assertEqual(image.getpixel((15, 5)), (0, 128, 0))
        self.assertEqual(image.getpixel((5, 5)), (255, 255, 255))

    def test_background_for(self) -> None:
        grid = Grid(Regular(1, 3))
        grid.link(Cell(0, 0), Cell(0, 1))
        distances = grid.distances_from(Cell(0, 0))
        self.assertIsNone(background_for(None, Cell(0, 0)))
        self.assertIsNone(background_for(distances, Cell(0, 2)))
        self.assertEqual(background_for(distances, Cell(0, 1)), (0, 128, 0))
        self.assertEqual(background_for(distances, Cell(0, 1), maximum=2), (128, 191, 128))

    def test_farthest_distance_is_found_once_per_image(self) -> None:
        original = Distances.max
        for kind in (Regular(6, 6), Polar(4), Hex(4, 4), Triangle(4, 6), Weave(5, 5)):
            with self.subTest(kind=repr(kind)):
                grid = RecursiveBacktracker(seed=3).generate(Grid(kind))
                grid.set_start(grid.cells()[0])
                with mock.patch.object(Distances, "max", autospec=True, side_effect=original) as spy:
                    render_png(grid, cell_size=10)
                self.assertEqual(spy.call_count, 1)

    def test_weave_tunnels_show_their_mouths(self) -> None:
        grid = KruskalsWeave(crossings=200, seed=4).generate(Grid(Weave(6, 6)))
        under = next(cell for cell in grid.cells() if cell.is_under)
        image = render_png(grid, cell_size=20, inset=0.2)
        x, y = under.col * 20, under.row * 20
        # the passage above covers the centre of the crossing cell
        self.assertEqual(image.getpixel((x + 10, y + 10)), (255, 255, 255))
        if Weave.linked_towards(grid, under, -1, 0):
            mouth = (x + 4, y + 1)
        else:
            mouth = (x + 1, y + 4)
        self.assertEqual(image.getpixel(mouth), (0, 0, 0))

    def test_every_topology_renders(self) -> None:
        cases = [
            (Polar(4), (161, 161)),
            (Triangle(2, 4), (51, 35)),
            (Weave(5, 6), (121, 101)),
            (Hex(3, 4), None),
        ]
        for kind, size in cases:
            with self.subTest(kind=repr(kind)):
                grid = RecursiveBacktracker(seed=2).generate(Grid(kind))
                grid.set_start(grid.cells()[0])
                image = render_png(grid, cell_size=20)
                self.assertIsInstance(image, Image.Image)
                if size is not None:
                    self.assertEqual(image.size, size)

    def test_invalid_arguments(self) -> None:
        grid = Grid(Regular(2, 2))
        with self.assertRaises(ValueError):
            render_png(grid, cell_size=1)
        with self.assertRaises(ValueError):
            render_png(grid, inset=0.5)

    def test_save_png_creates_directories(self) -> None:
        grid = RecursiveBacktracker(seed=1).generate(Grid(Regular(3, 3)))
        destination = save_png(grid, Path(self.tmp.name) / "nested" / "maze.png", cell_size=5, inset=0.2)
        self.assertTrue(destination.exists())
        with Image.open(destination) as image:
            self.assertEqual(image.size, (16, 16))


if __name__ == "__main__":
    unittest.main()
