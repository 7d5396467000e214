"""Multi-value directories.

Each directory holds a mapping of named values ("files"). Unlike the single
policy, values are individually addressed, so adding under a taken name is
rejected instead of overwriting.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping

from ..errors import DuplicateNameError, InvalidPathError, NameInUseError, NoFileError
from .directory import Directory, V
from .resolver import check_name, generate_name, split_first, split_last

logger = logging.getLogger(__name__)


class MultiDirectory(Directory[V]):
    """Directory holding any number of named values.

    Example:
        >>> root = MultiDirectory()
        >>> root.create_directory("New_Folder")
        'New_Folder'
        >>> root.insert_value("New_Folder/text.txt", "Hello World!")
        'text.txt'
        >>> root.borrow_value("New_Folder/text.txt")
        'Hello World!'
    """

    policy = "multi"

    def __init__(self):
        super().__init__()
        self._files: Dict[str, V] = {}

    @property
    def files(self) -> Mapping[str, V]:
        """Read-only view of the values held directly by this directory."""
        return MappingProxyType(self._files)

    # ---------------------------------------------------------------
    # Value operations

    def add_value(self, name: str, value: V) -> str:
        """Add a value directly to this directory.

        An empty name requests an anonymous name.

        Returns:
            The final name of the value

        Raises:
            NameInUseError: If a value with that name exists
            InvalidPathError: If the name is '.', holds a separator, or no
                anonymous name is free
        """
        check_name(name, self.naming)

        if not name:
            name = generate_name(self._files, len(self._files), self.naming)
        elif name in self._files:
            raise NameInUseError(name)

        self._files[name] = value
        return name

    def insert_value(self, path: str, value: V) -> str:
        """Insert a value into self or any subdirectory.

        Returns:
            The final name of the value
        """
        directory_path, name = split_last(path, self.naming)
        if not directory_path:
            return self.add_value(name, value)
        return self.borrow_directory(directory_path).add_value(name, value)

    def take_value(self, name: str) -> V:
        """Remove a value from this directory and return it.

        Raises:
            NoFileError: If there is no value with that name
        """
        try:
            return self._files.pop(name)
        except KeyError:
            raise NoFileError(name) from None

    def remove_value(self, path: str) -> V:
        """Remove a value from self or any subdirectory and return it."""
        branch, remaining_path = split_first(path, self.naming)
        if remaining_path is None:
            return self.take_value(path)
        return self.obtain_directory(branch).remove_value(remaining_path)

    def obtain_value(self, name: str) -> V:
        """Borrow a value of this directory.

        Raises:
            InvalidPathError: If the name is empty
            NoFileError: If there is no value with that name
        """
        if not name:
            raise InvalidPathError(name)
        try:
            return self._files[name]
        except KeyError:
            raise NoFileError(name) from None

    def borrow_value(self, path: str) -> V:
        """Borrow a value from self or any subdirectory."""
        branch, remaining_path = split_first(path, self.naming)
        if remaining_path is None:
            return self.obtain_value(path)
        return self.obtain_directory(branch).borrow_value(remaining_path)

    # ---------------------------------------------------------------
    # Directory hooks

    def _validate_merge_values(self, directory: "MultiDirectory[V]") -> None:
        for name in directory._files:
            if name in self._files:
                raise DuplicateNameError(name)

    def _merge_values(self, directory: "MultiDirectory[V]") -> None:
        self._files.update(directory._files)
        logger.debug("Moved %d file(s) into %r", len(directory._files), self.get_name())
        directory._files.clear()

    def value_count(self) -> int:
        return len(self._files)

    def listing_values(self) -> List[str]:
        return list(self._files)

    def _values_equal(self, other: Directory[V]) -> bool:
        return self._files == getattr(other, "_files", None)


__all__ = ['MultiDirectory']
