"""Single-value directories.

Each directory holds zero or one value; the directory itself is the key.
Adding a value overwrites the previous one and hands it back.
"""

import logging
from typing import Any, List, Optional

from ..errors import FileConflictError
from .directory import Directory, V

logger = logging.getLogger(__name__)

# Marks an empty slot; None is a storable value
_EMPTY = object()


class SingleDirectory(Directory[V]):
    """Directory holding at most one value.

    Any value can be stored, ``None`` included. Reading an empty slot
    returns ``None``; use ``has_value()`` to tell the two apart.

    Example:
        >>> root = SingleDirectory()
        >>> root.create_directory("settings")
        'settings'
        >>> root.insert_value("settings", {"theme": "dark"})
        >>> root.borrow_value("settings")
        {'theme': 'dark'}
    """

    policy = "single"

    def __init__(self):
        super().__init__()
        self._file: Any = _EMPTY

    @property
    def file(self) -> Optional[V]:
        """The attached value, or None."""
        return None if self._file is _EMPTY else self._file

    def has_value(self) -> bool:
        """Check if a value is attached to this directory."""
        return self._file is not _EMPTY

    # ---------------------------------------------------------------
    # Value operations

    def add_value(self, value: V) -> Optional[V]:
        """Attach a value to this directory.

        Returns:
            The previously attached value, or None
        """
        previous = self.file
        self._file = value
        return previous

    def insert_value(self, path: str, value: V) -> Optional[V]:
        """Attach a value to self or any subdirectory.

        An empty path means this directory.

        Returns:
            The previously attached value, or None
        """
        return self._resolve(path).add_value(value)

    def take_value(self) -> Optional[V]:
        """Detach and return the value of this directory."""
        value = self.file
        self._file = _EMPTY
        return value

    def remove_value(self, path: str) -> Optional[V]:
        """Detach and return the value of self or any subdirectory."""
        return self._resolve(path).take_value()

    def obtain_value(self) -> Optional[V]:
        """Return the value of this directory without detaching it."""
        return self.file

    def borrow_value(self, path: str) -> Optional[V]:
        """Return the value of self or any subdirectory without detaching it."""
        return self._resolve(path).obtain_value()

    def _resolve(self, path: str) -> "SingleDirectory[V]":
        if not path:
            return self
        return self.borrow_directory(path)

    # ---------------------------------------------------------------
    # Directory hooks

    def _validate_merge_values(self, directory: "SingleDirectory[V]") -> None:
        # No way to pick a winner between two values
        if directory.has_value():
            raise FileConflictError(directory.get_name())

    def _merge_values(self, directory: "SingleDirectory[V]") -> None:
        pass

    def value_count(self) -> int:
        return 1 if self.has_value() else 0

    def listing_values(self) -> List[str]:
        if not self.has_value():
            return []
        return [f"= {self._file!r}"]

    def _values_equal(self, other: Directory[V]) -> bool:
        return self._file == getattr(other, "_file", _EMPTY)


__all__ = ['SingleDirectory']
