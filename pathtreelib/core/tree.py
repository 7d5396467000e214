"""PathTree, the named root handle of a directory hierarchy.

A PathTree only gives the root a name and pins its path to the empty
string. Every operation is forwarded to the root directory.
"""

from typing import Generic, List, Optional, Type

from .directory import Directory, V
from .multi import MultiDirectory
from .single import SingleDirectory


class PathTree(Generic[V]):
    """Named wrapper around a root directory.

    Subclasses select the storage policy through ``directory_class`` and
    add the policy's value operations.
    """

    directory_class: Type[Directory] = Directory

    def __init__(self, name: str):
        """Create a new tree with an empty root directory.

        Args:
            name: Name of the root; not part of any cached path
        """
        self.directory = self.directory_class()
        self.directory._attach(name, "", 0)
        self.directory._attached = True

    # ---------------------------------------------------------------
    # Directory operations

    def add_directory(self, name: str, directory: Directory[V]) -> str:
        """Add subdirectory directly to the root."""
        return self.directory.add_directory(name, directory)

    def insert_directory(self, path: str, directory: Directory[V]) -> str:
        """Insert subdirectory to the root or any subdirectory."""
        return self.directory.insert_directory(path, directory)

    def create_directory(self, path: str) -> str:
        """Create subdirectory in the root or any subdirectory."""
        return self.directory.create_directory(path)

    def take_directory(self, name: str) -> Directory[V]:
        """Remove directory from the root and return it."""
        return self.directory.take_directory(name)

    def remove_directory(self, path: str) -> Directory[V]:
        """Remove directory from the root or any subdirectory and return it."""
        return self.directory.remove_directory(path)

    def obtain_directory(self, name: str) -> Directory[V]:
        """Borrow directory from the root."""
        return self.directory.obtain_directory(name)

    def borrow_directory(self, path: str) -> Directory[V]:
        """Borrow directory from the root or any subdirectory."""
        return self.directory.borrow_directory(path)

    def merge_tree(self, tree: "PathTree[V]") -> None:
        """Merge another tree's content into the root."""
        self.directory.merge_tree(tree)

    def merge_directory(self, directory: Directory[V]) -> None:
        """Merge another directory's content into the root."""
        self.directory.merge_directory(directory)

    def crawl(self) -> List[Directory[V]]:
        """Return every directory in the tree (root excluded)."""
        return self.directory.crawl()

    def tree(self) -> str:
        """Generate an overview of the tree, values included."""
        return self.directory.tree()

    def tree_dir(self) -> str:
        """Generate an overview of the tree, directories only."""
        return self.directory.tree_dir()

    def get_name(self) -> str:
        """Return cached root name."""
        return self.directory.get_name()

    def get_path(self) -> str:
        """Return cached root path (always empty)."""
        return self.directory.get_path()

    def get_depth(self) -> int:
        """Return cached root depth (always 0)."""
        return self.directory.get_depth()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathTree):
            return NotImplemented
        return self.directory == other.directory

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.get_name()!r})"


class SinglePathTree(PathTree[V]):
    """PathTree storing at most one value per directory.

    Example:
        >>> tree = SinglePathTree("Config")
        >>> tree.create_directory("window")
        'window'
        >>> tree.insert_value("window", (800, 600))
        >>> tree.borrow_value("window")
        (800, 600)
    """

    directory_class = SingleDirectory

    def add_value(self, value: V) -> Optional[V]:
        """Attach value to the root, returning the previous one."""
        return self.directory.add_value(value)

    def insert_value(self, path: str, value: V) -> Optional[V]:
        """Attach value to the root or any subdirectory."""
        return self.directory.insert_value(path, value)

    def take_value(self) -> Optional[V]:
        """Detach the root's value and return it."""
        return self.directory.take_value()

    def remove_value(self, path: str) -> Optional[V]:
        """Detach the value of the root or any subdirectory and return it."""
        return self.directory.remove_value(path)

    def obtain_value(self) -> Optional[V]:
        """Borrow the root's value."""
        return self.directory.obtain_value()

    def borrow_value(self, path: str) -> Optional[V]:
        """Borrow the value of the root or any subdirectory."""
        return self.directory.borrow_value(path)


class MultiPathTree(PathTree[V]):
    """PathTree storing named values in every directory.

    Example:
        >>> tree = MultiPathTree("FileSystem")
        >>> tree.create_directory("New_Folder")
        'New_Folder'
        >>> tree.create_directory("New_Folder/Strings")
        'Strings'
        >>> tree.insert_value("New_Folder/Strings/text.txt", "Hello World!")
        'text.txt'
    """

    directory_class = MultiDirectory

    def add_value(self, name: str, value: V) -> str:
        """Add value directly to the root."""
        return self.directory.add_value(name, value)

    def insert_value(self, path: str, value: V) -> str:
        """Insert value to the root or any subdirectory."""
        return self.directory.insert_value(path, value)

    def take_value(self, name: str) -> V:
        """Remove value from the root and return it."""
        return self.directory.take_value(name)

    def remove_value(self, path: str) -> V:
        """Remove value from the root or any subdirectory and return it."""
        return self.directory.remove_value(path)

    def obtain_value(self, name: str) -> V:
        """Borrow value from the root."""
        return self.directory.obtain_value(name)

    def borrow_value(self, path: str) -> V:
        """Borrow value from the root or any subdirectory."""
        return self.directory.borrow_value(path)


__all__ = ['PathTree', 'SinglePathTree', 'MultiPathTree']
