"""Contract tests ensuring both storage policies share hierarchy behavior.

These tests verify that single-value and multi-value directories:
1. Stamp identical names, paths and depths
2. Fail with the same error kinds on the same inputs
3. Generate the same anonymous names
4. Crawl and list directories identically
5. Merge directories atomically
"""

from abc import ABC, abstractmethod
from typing import Type

import pytest

from pathtreelib import (
    DuplicateNameError,
    InvalidPathError,
    NameInUseError,
    NoDirectoryError,
    MultiPathTree,
    PathTree,
    SinglePathTree,
)
from pathtreelib.testing import DirectoryTestHelper


class HierarchyContract(ABC):
    """Base contract that both directory policies must satisfy."""

    @property
    @abstractmethod
    def tree_class(self) -> Type[PathTree]:
        """PathTree subclass under test."""
        pass

    def create_standard_tree(self) -> PathTree:
        """Create a standard test tree.

        Tree structure:
        Root
        ├── dir1/
        │   ├── sub1/
        │   └── sub2/
        └── dir2/
            └── subdir/
        """
        tree = self.tree_class("Root")
        for path in ["dir1", "dir1/sub1", "dir1/sub2", "dir2", "dir2/subdir"]:
            tree.create_directory(path)
        return tree

    def test_identity_caches(self):
        tree = self.create_standard_tree()
        subdir = tree.borrow_directory("dir2/subdir")
        assert (subdir.get_name(), subdir.get_path(), subdir.get_depth()) == ("subdir", "dir2/subdir", 2)
        assert DirectoryTestHelper(tree.directory).check_consistency() == []

    def test_crawl(self):
        tree = self.create_standard_tree()
        assert DirectoryTestHelper(tree.directory).paths() == [
            "dir1", "dir1/sub1", "dir1/sub2", "dir2", "dir2/subdir",
        ]

    def test_listing(self):
        tree = self.create_standard_tree()
        assert tree.tree_dir() == "\n".join([
            "> Root",
            "  |-> dir1",
            "  |    |-> sub1",
            "  |    |-> sub2",
            "  |-> dir2",
            "  |    |-> subdir",
        ])

    def test_error_kinds(self):
        tree = self.create_standard_tree()
        with pytest.raises(NameInUseError):
            tree.create_directory("dir1/sub1")
        with pytest.raises(NoDirectoryError):
            tree.borrow_directory("dir3")
        with pytest.raises(NoDirectoryError):
            tree.remove_directory("dir1/sub3")
        with pytest.raises(InvalidPathError):
            tree.create_directory("dir1/.")
        with pytest.raises(InvalidPathError):
            tree.borrow_directory("dir1//sub1")

    def test_anonymous_generation(self):
        tree = self.create_standard_tree()
        assert tree.create_directory("dir1/") == ".||#:2"
        assert tree.create_directory("dir1/") == ".||#:3"
        assert ".||#:2" not in tree.tree()

    def test_self_alias(self):
        tree = self.create_standard_tree()
        assert tree.borrow_directory("dir2/.") is tree.borrow_directory("dir2")

    def test_round_trip(self):
        tree = self.create_standard_tree()
        helper = DirectoryTestHelper(tree.directory)
        before = helper.snapshot()

        dir1 = tree.take_directory("dir1")
        tree.add_directory("dir1", dir1)

        assert helper.snapshot() == before

    def test_merge_atomicity(self):
        tree = self.create_standard_tree()
        donor = self.tree_class("Donor")
        donor.create_directory("dir3")
        donor.create_directory("dir2")
        helper = DirectoryTestHelper(tree.directory)
        before = helper.snapshot()

        with pytest.raises(DuplicateNameError):
            tree.merge_tree(donor)

        assert helper.snapshot() == before
        assert set(donor.directory.children) == {"dir2", "dir3"}


class TestSingleContract(HierarchyContract):
    """Test single-value directories against contract."""

    tree_class = SinglePathTree


class TestMultiContract(HierarchyContract):
    """Test multi-value directories against contract."""

    tree_class = MultiPathTree
