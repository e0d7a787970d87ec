import random
import unittest

from mazes import Cell, Grid, Regular, Weave, Weighted, WeaveCell
from mazes.generators import RecursiveBacktracker


class GridLinkTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid(Regular(3, 4))

    def test_cells_and_lookup(self) -> None:
        self.assertEqual(self.grid.size(), 12)
        self.assertEqual(len(self.grid), 12)
        self.assertEqual(self.grid.get(2, 3), Cell(2, 3))
        self.assertIsNone(self.grid.get(3, 0))
        self.assertIsNone(self.grid.get(-1, 0))
        self.assertIn(Cell(0, 0), self.grid)
        self.assertEqual([len(row) for row in self.grid.rows()], [4, 4, 4])
        self.assertEqual(self.grid.rows()[1][0].row, 1)

    def test_neighbours_of_corner_and_centre(self) -> None:
        self.assertEqual(set(self.grid.neighbours(Cell(0, 0))), {Cell(1, 0), Cell(0, 1)})
        self.assertEqual(
            set(self.grid.neighbours(Cell(1, 1))),
            {Cell(0, 1), Cell(2, 1), Cell(1, 0), Cell(1, 2)},
        )
        # 3 rows of 3 horizontal pairs plus 2 rows of 4 vertical pairs
        self.assertEqual(len(self.grid.neighbouring_cells()), 17)

    def test_link_is_symmetric_and_idempotent(self) -> None:
        a, b = Cell(0, 0), Cell(0, 1)
        self.grid.link(a, b)
        self.grid.link(b, a)
        self.assertTrue(self.grid.are_linked(a, b))
        self.assertTrue(self.grid.are_linked(b, a))
        self.assertEqual(self.grid.links(a), [b])
        self.assertEqual(self.grid.link_count(), 1)

        self.grid.unlink(b, a)
        self.assertFalse(self.grid.are_linked(a, b))
        self.assertEqual(self.grid.links(b), [])
        # unlinking twice is harmless
        self.grid.unlink(a, b)

    def test_unknown_cells_are_rejected(self) -> None:
        with self.assertRaises(KeyError):
            self.grid.links(Cell(9, 9))
        with self.assertRaises(KeyError):
            self.grid.link(Cell(0, 0), Cell(9, 9))
        with self.assertRaises(KeyError):
            self.grid.distances_from(Cell(9, 9))

    def test_dead_ends(self) -> None:
        self.grid.link(Cell(0, 0), Cell(0, 1))
        self.grid.link(Cell(0, 1), Cell(0, 2))
        self.assertEqual(set(self.grid.dead_ends()), {Cell(0, 0), Cell(0, 2)})

    def test_graph_is_read_only(self) -> None:
        with self.assertRaises(Exception):
            self.grid.graph.add_edge(Cell(0, 0), Cell(0, 1))

    def test_negative_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            Regular(-1, 3)
        with self.assertRaises(ValueError):
            Weave(2, -2)


class EmptyGridTests(unittest.TestCase):
    def test_empty_grid(self) -> None:
        grid = Grid(Regular(0, 0))
        self.assertEqual(grid.size(), 0)
        self.assertEqual(grid.dead_ends(), [])
        self.assertEqual(grid.braid(1.0), 0)
        self.assertIsNone(grid.distances())
        with self.assertRaises(ValueError):
            grid.get_random_cell()
        with self.assertRaises(ValueError):
            grid.longest_path()

    def test_random_cell_uses_given_rng(self) -> None:
        grid = Grid(Regular(4, 4))
        first = grid.get_random_cell(random.Random(5))
        second = grid.get_random_cell(random.Random(5))
        self.assertEqual(first, second)
        self.assertIn(first, grid)


class BraidTests(unittest.TestCase):
    def _maze(self, seed: int) -> Grid:
        return RecursiveBacktracker(seed=seed).generate(Grid(Regular(10, 10)))

    def test_full_braid_reduces_dead_ends(self) -> None:
        grid = self._maze(3)
        before_edges = grid.link_count()
        before_dead_ends = len(grid.dead_ends())
        added = grid.braid(1.0, rng=random.Random(1))
        self.assertGreater(added, 0)
        self.assertEqual(grid.link_count(), before_edges + added)
        self.assertLess(len(grid.dead_ends()), before_dead_ends)
        # every dead end either became a junction or was joined by an earlier one
        self.assertEqual(grid.dead_ends(), [])

    def test_zero_probability_changes_nothing(self) -> None:
        grid = self._maze(4)
        edges = set(map(frozenset, grid.graph.edges()))
        self.assertEqual(grid.braid(0.0, rng=random.Random(1)), 0)
        self.assertEqual(set(map(frozenset, grid.graph.edges())), edges)

    def test_probability_is_validated(self) -> None:
        grid = self._maze(5)
        for p in (-0.1, 1.5):
            with self.assertRaises(ValueError):
                grid.braid(p)

    def test_dead_end_partner_is_preferred(self) -> None:
        # (1, 0) and (1, 1) are dead ends; (0, 1) is a corridor cell next to (1, 1)
        corridor = [Cell(1, 0), Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(1, 2), Cell(1, 1)]
        for seed in range(20):
            with self.subTest(seed=seed):
                grid = Grid(Regular(2, 3))
                for first, second in zip(corridor, corridor[1:]):
                    grid.link(first, second)
                self.assertEqual(set(grid.dead_ends()), {Cell(1, 0), Cell(1, 1)})

                self.assertEqual(grid.braid(1.0, rng=random.Random(seed)), 1)
                self.assertTrue(grid.are_linked(Cell(1, 1), Cell(1, 0)))
                self.assertFalse(grid.are_linked(Cell(1, 1), Cell(0, 1)))

    def test_braided_weave_keeps_links_symmetric(self) -> None:
        grid = RecursiveBacktracker(seed=8).generate(Grid(Weave(8, 8)))
        grid.braid(0.5, rng=random.Random(2))
        for cell in grid.cells():
            for other in grid.links(cell):
                self.assertIn(cell, grid.links(other))


class WeightTests(unittest.TestCase):
    def test_weights_default_to_one(self) -> None:
        grid = Grid(Weighted(2, 2))
        self.assertTrue(grid.is_weighted)
        self.assertEqual(grid.weight(Cell(1, 1)), 1)
        grid.set_weight(Cell(1, 1), 7)
        self.assertEqual(grid.weight(Cell(1, 1)), 7)

    def test_invalid_weights(self) -> None:
        grid = Grid(Weighted(2, 2))
        with self.assertRaises(ValueError):
            grid.set_weight(Cell(0, 0), 0)
        with self.assertRaises(KeyError):
            grid.set_weight(Cell(5, 5), 3)
        with self.assertRaises(KeyError):
            grid.weight(Cell(5, 5))

    def test_unweighted_grids_refuse_weights(self) -> None:
        grid = Grid(Regular(2, 2))
        self.assertFalse(grid.is_weighted)
        self.assertEqual(grid.weight(Cell(0, 0)), 1)
        with self.assertRaises(TypeError):
            grid.set_weight(Cell(0, 0), 3)


class TunnelTests(unittest.TestCase):
    def test_tunnel_under_adds_under_cell(self) -> None:
        grid = Grid(Weave(3, 3))
        under = grid.tunnel_under(WeaveCell(1, 1))
        self.assertEqual(under, WeaveCell(1, 1, True))
        self.assertTrue(under.is_under)
        self.assertEqual(under.surface(), WeaveCell(1, 1))
        self.assertEqual(grid.size(), 10)

    def test_tunnel_errors(self) -> None:
        grid = Grid(Weave(3, 3))
        under = grid.tunnel_under(WeaveCell(1, 1))
        with self.assertRaises(RuntimeError):
            grid.tunnel_under(WeaveCell(1, 1))
        with self.assertRaises(RuntimeError):
            grid.tunnel_under(under)
        with self.assertRaises(RuntimeError):
            Grid(Regular(2, 2)).tunnel_under(Cell(0, 0))
        with self.assertRaises(KeyError):
            grid.tunnel_under(WeaveCell(7, 7))


if __name__ == "__main__":
    unittest.main()
