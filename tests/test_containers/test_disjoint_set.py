"""Tests for the disjoint-set forest."""

import pytest

from undigraph.containers import DisjointSet


def make_forest(items):
    forest = DisjointSet()
    for item in items:
        forest.make_set(item)
    return forest


def check(forest, items, expected_ids):
    for item, expected in zip(items, expected_ids):
        assert forest.find_set(item) == expected


class TestMakeSetAndFindSet:
    """Tests for registration and lookup."""

    def test_ids_follow_registration_order(self):
        """Test that fresh singletons get ids 0..n-1."""
        items = ["a", "b", "c", "d", "e"]
        forest = make_forest(items)

        for _ in range(5):
            check(forest, items, [0, 1, 2, 3, 4])
        assert len(forest) == 5
        assert forest.num_sets() == 5

    def test_duplicate_make_set_rejected(self):
        """Test that registering an element twice fails."""
        forest = make_forest(["a"])
        with pytest.raises(ValueError, match="already registered"):
            forest.make_set("a")
        assert len(forest) == 1

    def test_find_set_unregistered(self):
        """Test that find_set on an unknown element fails."""
        forest = make_forest(["a", "b", "c", "d", "e"])
        with pytest.raises(ValueError, match="not registered"):
            forest.find_set("f")

    def test_find_set_on_empty_forest(self):
        """Test find_set on a forest with no elements."""
        forest = make_forest([])
        with pytest.raises(ValueError):
            forest.find_set("a")

    def test_contains(self):
        """Test membership checks."""
        forest = make_forest(["a", "b"])
        assert "a" in forest
        assert "z" not in forest


class TestUnion:
    """Tests for union and its strictness."""

    def test_union_simple(self):
        """Test that unioned elements share an id from either side."""
        items = ["a", "b", "c", "d", "e"]
        forest = make_forest(items)

        forest.union("a", "b")
        id1 = forest.find_set("a")
        assert id1 in (0, 1)
        assert forest.find_set("b") == id1

        forest.union("c", "d")
        id2 = forest.find_set("c")
        assert id2 in (2, 3)
        assert forest.find_set("d") == id2

        assert forest.find_set("e") == 4
        assert forest.num_sets() == 3

    def test_union_unequal_trees(self):
        """Test that a singleton joins a larger tree's class."""
        items = ["a", "b", "c", "d", "e"]
        forest = make_forest(items)

        forest.union("a", "b")
        root = forest.find_set("a")
        forest.union("a", "c")

        for _ in range(5):
            check(forest, items, [root, root, root, 3, 4])

    def test_union_by_rank_keeps_larger_root(self):
        """Test that the higher-rank root survives a union."""
        forest = make_forest(["a", "b", "c", "d", "e"])

        forest.union("a", "b")
        assert forest.find_set("c") == 2
        assert forest.find_set("b") == forest.find_set("a")

        forest.union("a", "c")
        assert forest.find_set("c") == 0

        forest.union("d", "e")
        forest.union("c", "d")
        assert forest.find_set("b") == forest.find_set("d")

    def test_union_unregistered(self):
        """Test that union with an unknown element fails."""
        forest = make_forest(["a", "b", "c", "d", "e"])
        with pytest.raises(ValueError, match="not registered"):
            forest.union("a", "f")
        # Forest untouched
        assert forest.num_sets() == 5
        assert forest.find_set("a") == 0

    def test_union_already_joined(self):
        """Test that re-unioning joined elements fails."""
        forest = make_forest(["a", "b", "c", "d", "e"])
        forest.union("a", "b")

        with pytest.raises(ValueError, match="same set"):
            forest.union("a", "b")
        with pytest.raises(ValueError, match="same set"):
            forest.union("b", "a")
        assert forest.num_sets() == 4

    def test_union_transitively_joined(self):
        """Test that transitively joined elements cannot be unioned."""
        forest = make_forest(["a", "b", "c", "d", "e"])
        forest.union("a", "b")
        forest.union("c", "d")
        forest.union("b", "c")

        with pytest.raises(ValueError):
            forest.union("a", "d")

    def test_none_is_a_valid_element(self):
        """Test that None can be registered and unioned."""
        forest = make_forest([None, "a", "b"])

        forest.union(None, "a")
        assert forest.find_set(None) == forest.find_set("a")

        forest.union("b", None)
        assert forest.find_set("b") == forest.find_set("a")

    def test_connected(self):
        """Test connected reflects unions."""
        forest = make_forest([1, 2, 3])
        assert not forest.connected(1, 2)
        forest.union(1, 2)
        assert forest.connected(1, 2)
        assert not forest.connected(2, 3)


class TestLargeForests:
    """Tests for long union chains and repeated finds."""

    def test_union_chain(self):
        """Test a chain of unions collapses into one class."""
        items = list(range(100))
        forest = make_forest(items)

        for i in range(len(items) - 1):
            forest.union(i, i + 1)

        root = forest.find_set(0)
        for _ in range(5):
            check(forest, items, [root] * len(items))
        assert forest.num_sets() == 1

    def test_long_chain_stays_rooted_at_first(self):
        """Test a long chain keeps the first element as root."""
        big = 100_000
        forest = make_forest(range(big))

        for i in range(big - 1):
            forest.union(i, i + 1)

        assert forest.find_set(0) == forest.find_set(big - 1)
        assert forest.find_set(10) == 0

    def test_star_forest_repeated_finds(self):
        """Test many finds against a star-shaped forest."""
        forest = DisjointSet()
        forest.make_set(0)

        n_items = 2000
        for i in range(1, n_items):
            forest.make_set(i)
            forest.union(0, i)

        root = forest.find_set(0)
        for _ in range(20):
            for j in range(n_items):
                assert forest.find_set(j) == root
