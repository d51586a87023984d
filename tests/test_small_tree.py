import unittest

from pagegen.small_tree import EMPTY, Four, Join, Many, One, Three, Two, is_empty, join, tree_of


class JoinTest(unittest.TestCase):
    def test_join_with_empty_returns_other_operand(self) -> None:
        tree = Two("a", "b")
        self.assertIs(join(EMPTY, tree), tree)
        self.assertIs(join(tree, EMPTY), tree)
        self.assertIs(join(EMPTY, EMPTY), EMPTY)

    def test_join_of_non_empty_trees_keeps_order(self) -> None:
        joined = join(One("a"), Three("b", "c", "d"))
        self.assertIsInstance(joined, Join)
        self.assertEqual(list(joined), ["a", "b", "c", "d"])

    def test_nested_joins_traverse_depth_first(self) -> None:
        tree = join(join(One(1), Two(2, 3)), join(Many([4, 5, 6, 7, 8]), Four(9, 10, 11, 12)))
        self.assertEqual(list(tree), list(range(1, 13)))
        self.assertEqual(len(tree), 12)

    def test_repeated_empty_merges_do_not_grow(self) -> None:
        tree = One("x")
        for _ in range(10):
            tree = join(EMPTY, join(tree, EMPTY))
        self.assertEqual(tree, One("x"))


class TreeOfTest(unittest.TestCase):
    def test_picks_smallest_variant(self) -> None:
        self.assertIs(tree_of([]), EMPTY)
        self.assertEqual(tree_of(["a"]), One("a"))
        self.assertEqual(tree_of("ab"), Two("a", "b"))
        self.assertEqual(tree_of("abc"), Three("a", "b", "c"))
        self.assertEqual(tree_of("abcd"), Four("a", "b", "c", "d"))
        self.assertEqual(tree_of("abcde"), Many(("a", "b", "c", "d", "e")))

    def test_is_empty(self) -> None:
        self.assertTrue(is_empty(EMPTY))
        self.assertTrue(is_empty(tree_of(())))
        self.assertFalse(is_empty(One("")))

    def test_trees_are_immutable(self) -> None:
        tree = Many(["a", "b"])
        self.assertIsInstance(tree.items, tuple)
        with self.assertRaises(AttributeError):
            tree.items = ("c",)  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
