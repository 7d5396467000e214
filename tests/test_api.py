"""Tests for the high-level functional API."""

import pytest

from pathtreelib import (
    MultiPathTree,
    SinglePathTree,
    count_directories,
    find_directories,
    get_leaf_directories,
    get_tree_paths,
    get_tree_stats,
    walk_directories,
)


@pytest.fixture
def tree():
    """Root with two branches, one hidden directory and a few files.

    Root
    ├── a/            (1 file)
    │   └── a1/       (2 files)
    ├── b/
    └── .hidden/
        └── inner/
    """
    tree = MultiPathTree("Root")
    for path in ["a", "a/a1", "b", ".hidden", ".hidden/inner"]:
        tree.create_directory(path)
    tree.insert_value("a/notes.txt", "n")
    tree.insert_value("a/a1/x", 1)
    tree.insert_value("a/a1/y", 2)
    return tree


def test_walk_includes_root_by_default(tree):
    walked = list(walk_directories(tree))
    assert walked[0] is tree.directory
    assert len(walked) == 6


def test_walk_without_hidden(tree):
    result = [d.get_path() for d in walk_directories(tree, include_hidden=False)]
    assert result == ["", "a", "a/a1", "b"]


def test_walk_starting_inside_hidden_directory(tree):
    hidden = tree.borrow_directory(".hidden")
    result = [d.get_path() for d in walk_directories(hidden, include_hidden=False)]
    assert result == [".hidden", ".hidden/inner"]


def test_walk_breadth_first(tree):
    result = [d.get_path() for d in walk_directories(tree, strategy="bfs", min_depth=1)]
    assert result == ["a", "b", ".hidden", "a/a1", ".hidden/inner"]


def test_count(tree):
    assert count_directories(tree) == 6
    assert count_directories(tree, max_depth=1) == 4
    assert count_directories(tree, min_depth=1, include_hidden=False) == 3


def test_find(tree):
    found = [d.get_path() for d in find_directories(tree, lambda d: d.value_count() > 0)]
    assert found == ["a", "a/a1"]


def test_tree_paths(tree):
    assert list(get_tree_paths(tree, include_hidden=False)) == ["a", "a/a1", "b"]
    assert list(get_tree_paths(tree, min_depth=0, max_depth=0)) == [""]


def test_leaves(tree):
    leaves = sorted(d.get_path() for d in get_leaf_directories(tree))
    assert leaves == [".hidden/inner", "a/a1", "b"]


def test_stats(tree):
    stats = get_tree_stats(tree)
    assert stats['total_directories'] == 6
    assert stats['leaf_directories'] == 3
    assert stats['internal_directories'] == 3
    assert stats['total_values'] == 3
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 3, 2: 2}
    assert stats['average_branching'] == pytest.approx(5 / 3)


def test_stats_for_subtree(tree):
    stats = get_tree_stats(tree.borrow_directory("a"))
    assert stats['total_directories'] == 2
    assert stats['depths'] == {0: 1, 1: 1}
    assert stats['total_values'] == 3


def test_stats_single_policy():
    tree = SinglePathTree("Root")
    tree.create_directory("x")
    tree.insert_value("x", "value")
    stats = get_tree_stats(tree)
    assert stats['total_values'] == 1
    assert stats['average_branching'] == 1


def test_rejects_other_roots():
    with pytest.raises(TypeError):
        count_directories({"not": "a tree"})
