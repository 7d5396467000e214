"""Path resolution helpers.

These are pure functions over text. Directories call them to split an input
path before walking the hierarchy:

- insert-family operations split at the *last* separator, because the
  target is named by its trailing segment and its ancestors must exist;
- lookup and removal split at the *first* separator and descend one level
  at a time, so every level validates its own segment.
"""

import logging
from typing import Container, Optional, Tuple

from ..config import DEFAULT_NAMING, NamingConfig
from ..errors import InvalidPathError

logger = logging.getLogger(__name__)


def split_first(path: str, naming: NamingConfig = DEFAULT_NAMING) -> Tuple[str, Optional[str]]:
    """Split a path at its first separator.

    Args:
        path: Path to split
        naming: Naming conventions providing the separator

    Returns:
        ``(head, rest)`` where ``rest`` is None when the path holds
        no separator at all

    Example:
        >>> split_first("a/b/c")
        ('a', 'b/c')
        >>> split_first("a")
        ('a', None)
    """
    head, separator, rest = path.partition(naming.separator)
    if not separator:
        return head, None
    return head, rest


def split_last(path: str, naming: NamingConfig = DEFAULT_NAMING) -> Tuple[str, str]:
    """Split a path at its last separator.

    Args:
        path: Path to split
        naming: Naming conventions providing the separator

    Returns:
        ``(ancestor_path, name)``; ``ancestor_path`` is empty when the
        name lives directly in the current directory

    Example:
        >>> split_last("a/b/c")
        ('a/b', 'c')
        >>> split_last("a/")
        ('a', '')
    """
    ancestor, separator, name = path.rpartition(naming.separator)
    if not separator:
        return "", path
    return ancestor, name


def join_path(parent_path: str, name: str, naming: NamingConfig = DEFAULT_NAMING) -> str:
    """Build the cached path of ``name`` attached under ``parent_path``."""
    if not parent_path:
        return name
    return f"{parent_path}{naming.separator}{name}"


def check_name(name: str, naming: NamingConfig = DEFAULT_NAMING) -> None:
    """Reject names that could never be addressed by path.

    The empty name is accepted here; it requests generation.

    Raises:
        InvalidPathError: If the name is the self alias or holds a separator
    """
    if name == naming.self_alias:
        raise InvalidPathError(name)
    if naming.separator in name:
        raise InvalidPathError(name)


def generate_name(taken: Container[str],
                  count: int,
                  naming: NamingConfig = DEFAULT_NAMING) -> str:
    """Generate a free anonymous name.

    Candidates are ``<anonymous_prefix><count>``, ``<anonymous_prefix><count+1>``
    and so on until one is not taken.

    Args:
        taken: Names already in use at this level
        count: Number of entries already stored at this level
        naming: Naming conventions providing the prefix and retry bound

    Returns:
        The first free candidate

    Raises:
        InvalidPathError: If every candidate within the retry bound is taken
    """
    for attempt in range(naming.max_name_attempts):
        candidate = naming.anonymous_name(count + attempt)
        if candidate not in taken:
            logger.debug("Generated anonymous name %r after %d attempt(s)",
                         candidate, attempt + 1)
            return candidate

    raise InvalidPathError(
        f"no free anonymous name after {naming.max_name_attempts} attempts"
    )


__all__ = [
    'split_first',
    'split_last',
    'join_path',
    'check_name',
    'generate_name',
]
