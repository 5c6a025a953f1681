"""
Tests for the binary search tree sort.
"""

from __future__ import annotations

import random

from toybox.treesort import TreeSort, tree_sort


def test_empty_tree() -> None:
    tree = TreeSort.create()
    assert tree.value is None
    assert tree.count == 0
    assert tree.to_list() == []


def test_insert_builds_search_tree() -> None:
    tree = TreeSort.create()
    for v in [8, 3, 10, 1, 6, 14]:
        tree.insert(v)
    assert tree.value == 8
    assert tree.left.value == 3
    assert tree.right.value == 10
    assert tree.left.left.value == 1
    assert tree.left.right.value == 6
    assert tree.right.right.value == 14
    assert tree.to_list() == [1, 3, 6, 8, 10, 14]


def test_duplicates_bump_count() -> None:
    tree = TreeSort.create()
    for v in [4, 2, 4, 4, 2]:
        tree.insert(v)
    assert tree.count == 3
    assert tree.left.count == 2
    assert tree.insert(2) is tree.left
    assert tree.left.count == 3
    assert tree.to_list() == [2, 4]


def test_insert_none_is_ignored() -> None:
    tree = TreeSort.create()
    assert tree.insert(None) is None
    assert tree.to_list() == []


def test_create_from_node_gives_fresh_node() -> None:
    tree = TreeSort.create()
    tree.insert(1)
    child = tree.create()
    assert isinstance(child, TreeSort)
    assert child.value is None


def test_tree_sort_random_values() -> None:
    rng = random.Random(3)
    values = [rng.randint(0, 1000) for _ in range(300)]
    assert tree_sort(values) == sorted(set(values))


def test_tree_sort_strings_and_invalid_input() -> None:
    assert tree_sort(("pear", "apple", "fig")) == ["apple", "fig", "pear"]
    assert tree_sort([]) == []
    assert tree_sort("cab") == "cab"


def test_tree_sort_degenerate_input() -> None:
    ascending = list(range(5000))
    assert tree_sort(ascending) == ascending
    assert tree_sort(ascending[::-1]) == ascending
