"""Error taxonomy for PathTreeLib.

Every hierarchy and value operation reports failure by raising one of the
exceptions below. They propagate unchanged from whatever recursion depth
they were raised at, so callers can catch the specific kind they care about
or ``PathTreeError`` for all of them.
"""


class PathTreeError(Exception):
    """Base class for all path tree failures.

    Attributes:
        name: The directory/file name (or a short message) the error is about
    """

    template = "{name}"

    def __init__(self, name: str):
        self.name = name
        super().__init__(self.template.format(name=name))


class DuplicateNameError(PathTreeError):
    """Raised when merging directories and both sides hold the same name."""

    template = "duplicate name conflict for '{name}'"


class NameInUseError(PathTreeError):
    """Raised when a directory/file is added under a name that is taken."""

    template = "name '{name}' is already in use"


class InvalidPathError(PathTreeError):
    """Raised for an empty name lookup, a misused '.' alias, or when no free
    anonymous name could be generated."""

    template = "invalid path '{name}'"


class NoDirectoryError(PathTreeError):
    """Raised when a directory that doesn't exist is located."""

    template = "unable to locate '{name}' directory"


class NoFileError(PathTreeError):
    """Raised when a file that doesn't exist is located."""

    template = "unable to locate '{name}' file"


class FileConflictError(PathTreeError):
    """Raised when a single-value directory still holding a value is merged."""

    template = "directory '{name}' still holds a file and cannot be merged"


__all__ = [
    'PathTreeError',
    'DuplicateNameError',
    'NameInUseError',
    'InvalidPathError',
    'NoDirectoryError',
    'NoFileError',
    'FileConflictError',
]
