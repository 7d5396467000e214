"""Tests for the PathTree root handle."""

import pytest

from pathtreelib import (
    MultiDirectory,
    MultiPathTree,
    NoDirectoryError,
    SingleDirectory,
    SinglePathTree,
)


class TestRoot:

    def test_root_identity(self):
        tree = MultiPathTree("FileSystem")
        assert tree.get_name() == "FileSystem"
        assert tree.get_path() == ""
        assert tree.get_depth() == 0
        assert isinstance(tree.directory, MultiDirectory)

    def test_single_policy_root(self):
        tree = SinglePathTree("Config")
        assert isinstance(tree.directory, SingleDirectory)

    def test_root_name_not_in_paths(self):
        tree = MultiPathTree("FileSystem")
        tree.create_directory("a")
        tree.create_directory("a/b")
        assert tree.borrow_directory("a/b").get_path() == "a/b"

    def test_delegation(self):
        tree = MultiPathTree("Root")
        assert tree.add_directory("a", MultiDirectory()) == "a"
        assert tree.insert_directory("a/b", MultiDirectory()) == "b"
        assert tree.obtain_directory("a") is tree.directory.obtain_directory("a")
        assert tree.borrow_directory("a/b") is tree.directory.borrow_directory("a/b")

        removed = tree.remove_directory("a/b")
        assert removed.get_name() == "b"
        taken = tree.take_directory("a")
        assert taken.get_name() == "a"
        with pytest.raises(NoDirectoryError):
            tree.borrow_directory("a")

    def test_merge_directory_into_root(self):
        tree = MultiPathTree("Root")
        donor = MultiDirectory()
        donor.add_value("x", 1)
        donor.create_directory("d")

        tree.merge_directory(donor)

        assert tree.obtain_value("x") == 1
        assert tree.obtain_directory("d").get_path() == "d"


class TestEquality:

    def test_equal_trees(self):
        first = MultiPathTree("Root")
        second = MultiPathTree("Root")
        for tree in (first, second):
            tree.create_directory("a")
            tree.insert_value("a/file", 1)
        assert first == second

    def test_name_matters(self):
        assert MultiPathTree("A") != MultiPathTree("B")

    def test_values_matter(self):
        first = SinglePathTree("Root")
        second = SinglePathTree("Root")
        first.add_value(1)
        assert first != second

    def test_policy_matters(self):
        assert MultiPathTree("Root") != SinglePathTree("Root")

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(MultiPathTree("Root"))

    def test_repr(self):
        assert repr(MultiPathTree("Root")) == "MultiPathTree(name='Root')"
