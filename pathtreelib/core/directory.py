"""Directory abstraction for PathTreeLib.

A Directory exclusively owns its child directories (and, depending on the
policy, its values). There are no parent back references: ``path`` and
``depth`` are caches stamped by the parent at the moment a directory is
attached, never live links.

Concrete policies:
- ``SingleDirectory`` holds at most one unnamed value
- ``MultiDirectory`` holds a mapping of named values

Both share every hierarchy operation defined here.
"""

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Generic, List, Mapping, TypeVar

from ..config import DEFAULT_NAMING, NamingConfig
from ..errors import DuplicateNameError, InvalidPathError, NameInUseError, NoDirectoryError
from ..render import render_listing
from .resolver import check_name, generate_name, join_path, split_first, split_last
from .traverser import DepthFirstPreOrderTraverser

if TYPE_CHECKING:
    from .tree import PathTree

logger = logging.getLogger(__name__)

V = TypeVar("V")


class Directory(ABC, Generic[V]):
    """Abstract base class for directories in a path tree.

    Subclasses decide how values are stored (the *policy*) and must
    implement the value hooks used by merging and listing. Everything that
    deals with child directories lives here.

    Class attributes:
        policy: Short policy tag; directories only accept children with
            the same tag
        naming: Naming conventions used for resolution and generation
    """

    policy: str = ""
    naming: NamingConfig = DEFAULT_NAMING

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        errors = cls.naming.validate()
        if errors:
            raise ValueError(
                f"Invalid naming configuration for {cls.__name__}: {'; '.join(errors)}"
            )

    def __init__(self):
        """Create a new unassigned directory."""
        # Cached identity, stamped only by _attach()
        self._name: str = self.naming.unassigned_name
        self._path: str = ""
        self._depth: int = 0

        self._directories: Dict[str, "Directory[V]"] = {}
        # Set while a parent (or a PathTree) owns this directory
        self._attached = False

    # ---------------------------------------------------------------
    # Cached identity

    def get_name(self) -> str:
        """Return cached name."""
        return self._name

    def get_path(self) -> str:
        """Return cached path from the root (root's own name excluded)."""
        return self._path

    def get_depth(self) -> int:
        """Return cached depth (root is 0)."""
        return self._depth

    @property
    def children(self) -> Mapping[str, "Directory[V]"]:
        """Read-only view of the direct child directories."""
        return MappingProxyType(self._directories)

    def _attach(self, name: str, path: str, depth: int) -> None:
        """Stamp name/path/depth on this directory and its whole subtree."""
        self._name = name
        self._path = path
        self._depth = depth
        for child_name, child in self._directories.items():
            child._attach(child_name, join_path(path, child_name, self.naming), depth + 1)

    # ---------------------------------------------------------------
    # Directory operations

    def add_directory(self, name: str, directory: "Directory[V]") -> str:
        """Add a subdirectory directly to this directory.

        An empty name requests an anonymous name.

        Args:
            name: Name of the new child
            directory: Directory to attach (ownership moves to self)

        Returns:
            The final name, which differs from ``name`` only when generated

        Raises:
            NameInUseError: If a child with that name exists
            InvalidPathError: If the name is '.', holds a separator, or no
                anonymous name is free
            TypeError: If ``directory`` uses another storage policy
            ValueError: If ``directory`` is still attached elsewhere or
                contains self
        """
        self._check_compatible(directory)
        if directory._attached:
            raise ValueError(f"'{directory._name}' is already attached; take it out first")
        self._check_not_ancestor(directory)
        check_name(name, self.naming)

        if not name:
            name = generate_name(self._directories, len(self._directories), self.naming)
        elif name in self._directories:
            raise NameInUseError(name)

        directory._attach(name, join_path(self._path, name, self.naming), self._depth + 1)
        self._directories[name] = directory
        directory._attached = True
        logger.debug("Attached directory %r", directory._path)
        return name

    def insert_directory(self, path: str, directory: "Directory[V]") -> str:
        """Insert a subdirectory into self or any subdirectory.

        The ancestors named by ``path`` must already exist.

        Returns:
            The final name of the inserted directory
        """
        ancestor_path, name = split_last(path, self.naming)
        if not ancestor_path:
            return self.add_directory(name, directory)
        return self.borrow_directory(ancestor_path).add_directory(name, directory)

    def create_directory(self, path: str) -> str:
        """Create an empty subdirectory in self or any subdirectory.

        Returns:
            The final name of the created directory
        """
        return self.insert_directory(path, type(self)())

    def take_directory(self, name: str) -> "Directory[V]":
        """Remove a direct child and return it.

        Raises:
            NoDirectoryError: If there is no child with that exact name
        """
        try:
            directory = self._directories.pop(name)
        except KeyError:
            raise NoDirectoryError(name) from None
        directory._attached = False
        logger.debug("Detached directory %r", directory._path)
        return directory

    def remove_directory(self, path: str) -> "Directory[V]":
        """Remove a directory from self or any subdirectory and return it."""
        branch, remaining_path = split_first(path, self.naming)
        if remaining_path is None:
            return self.take_directory(path)
        return self.obtain_directory(branch).remove_directory(remaining_path)

    def obtain_directory(self, name: str) -> "Directory[V]":
        """Borrow a direct child, or self for the '.' alias.

        Raises:
            InvalidPathError: If the name is empty
            NoDirectoryError: If there is no child with that name
        """
        if not name:
            raise InvalidPathError(name)
        if name == self.naming.self_alias:
            return self
        try:
            return self._directories[name]
        except KeyError:
            raise NoDirectoryError(name) from None

    def borrow_directory(self, path: str) -> "Directory[V]":
        """Borrow a directory from self or any subdirectory."""
        branch, remaining_path = split_first(path, self.naming)
        if remaining_path is None:
            return self.obtain_directory(path)
        return self.obtain_directory(branch).borrow_directory(remaining_path)

    # ---------------------------------------------------------------
    # Merging

    def merge_directory(self, directory: "Directory[V]") -> None:
        """Merge another directory's content into this one.

        Validation runs to completion before anything moves, so a failed
        merge leaves both directories untouched. On success the donor is
        left empty.

        Raises:
            DuplicateNameError: If a child (or value) name exists on both sides
            FileConflictError: If a single-value donor still holds its value
            InvalidPathError: If a donor child name is not valid under this
                directory's naming
            TypeError: If ``directory`` uses another storage policy
        """
        self._check_compatible(directory)
        if directory is not self:
            self._check_not_ancestor(directory)

        self._validate_merge_values(directory)
        for name in directory._directories:
            check_name(name, self.naming)
            if name in self._directories:
                raise DuplicateNameError(name)

        self._merge_values(directory)
        while directory._directories:
            name = next(iter(directory._directories))
            child = directory._directories.pop(name)
            child._attached = False
            self.add_directory(name, child)

        logger.debug("Merged %r into %r", directory._name, self._name)

    def merge_tree(self, tree: "PathTree[V]") -> None:
        """Merge the root directory of a PathTree into this one."""
        self.merge_directory(tree.directory)

    @abstractmethod
    def _validate_merge_values(self, directory: "Directory[V]") -> None:
        """Raise if the donor's values cannot be merged into self."""
        pass

    @abstractmethod
    def _merge_values(self, directory: "Directory[V]") -> None:
        """Move the donor's values into self (already validated)."""
        pass

    # ---------------------------------------------------------------
    # Values (policy specific)

    @abstractmethod
    def value_count(self) -> int:
        """Return how many values this directory holds."""
        pass

    @abstractmethod
    def listing_values(self) -> List[str]:
        """Return labels for the values shown in listings of this directory."""
        pass

    # ---------------------------------------------------------------
    # Scanning and listing

    def crawl(self) -> List["Directory[V]"]:
        """Return every directory below this one (self excluded).

        The order is depth-first pre-order, children in insertion order.
        """
        traverser = DepthFirstPreOrderTraverser()
        return [directory for directory, _ in traverser.traverse(self, min_depth=1)]

    def tree(self) -> str:
        """Generate an overview of the subtree, values included."""
        return render_listing(self, show_values=True)

    def tree_dir(self) -> str:
        """Generate an overview of the subtree, directories only."""
        return render_listing(self, show_values=False)

    # ---------------------------------------------------------------

    def _check_compatible(self, directory: "Directory[V]") -> None:
        if not isinstance(directory, Directory) or directory.policy != self.policy:
            raise TypeError(
                f"{type(self).__name__} only accepts '{self.policy}' directories, "
                f"got {type(directory).__name__}"
            )

    def _check_not_ancestor(self, directory: "Directory[V]") -> None:
        # A directory cannot end up inside its own subtree
        if directory is self or any(d is self for d in directory.crawl()):
            raise ValueError(f"'{directory._name}' contains the target directory")

    def __eq__(self, other: object) -> bool:
        """Directories are equal if identity caches, values and subtrees match."""
        if not isinstance(other, Directory):
            return NotImplemented
        return (self.policy == other.policy
                and self._name == other._name
                and self._path == other._path
                and self._depth == other._depth
                and self._values_equal(other)
                and self._directories == other._directories)

    __hash__ = None

    @abstractmethod
    def _values_equal(self, other: "Directory[V]") -> bool:
        pass

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(path={self._path!r}, children={len(self._directories)})"


__all__ = ['Directory']
