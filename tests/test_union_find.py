import unittest

from mazes import DisjointSet


class DisjointSetTests(unittest.TestCase):
    def test_items_start_in_their_own_sets(self) -> None:
        sets = DisjointSet("abcd")
        self.assertEqual(len(sets), 4)
        self.assertEqual(sets.set_count(), 4)
        self.assertFalse(sets.same_set("a", "b"))

    def test_union_merges_once(self) -> None:
        sets = DisjointSet("abcd")
        self.assertTrue(sets.union("a", "b"))
        self.assertTrue(sets.union("c", "d"))
        self.assertFalse(sets.union("b", "a"))
        self.assertTrue(sets.union("a", "d"))
        self.assertTrue(sets.same_set("b", "c"))
        self.assertEqual(sets.set_count(), 1)

    def test_find_adds_unknown_items(self) -> None:
        sets = DisjointSet()
        self.assertNotIn("x", sets)
        self.assertEqual(sets.find("x"), "x")
        self.assertIn("x", sets)

    def test_groups_keep_first_seen_order(self) -> None:
        sets = DisjointSet(range(6))
        sets.union(0, 3)
        sets.union(4, 1)
        self.assertEqual(sets.groups(range(6)), [[0, 3], [1, 4], [2], [5]])

    def test_long_chain(self) -> None:
        sets = DisjointSet(range(1000))
        for item in range(999):
            sets.union(item, item + 1)
        self.assertTrue(sets.same_set(0, 999))
        self.assertEqual(sets.set_count(), 1)


if __name__ == "__main__":
    unittest.main()
