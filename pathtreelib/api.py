"""High-level API for PathTreeLib.

This module provides simple, functional interfaces for scanning a path
tree. Every function accepts either a ``PathTree`` or any ``Directory`` as
the starting point.
"""

from typing import Any, Callable, Dict, Iterator, Optional, Union

from .config import TraversalStrategy
from .core.directory import Directory
from .core.traverser import create_traverser
from .core.tree import PathTree


def walk_directories(
    root: Union[PathTree, Directory],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_hidden: bool = True,
    include_filter: Optional[Callable[[Directory], bool]] = None,
) -> Iterator[Directory]:
    """Simple interface for walking a subtree.

    Args:
        root: Tree or directory to start from (depth 0)
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum relative depth to traverse
        min_depth: Minimum relative depth before yielding directories
        include_hidden: Also walk directories whose name is hidden
        include_filter: Function to determine if a directory is yielded

    Yields:
        Directory instances that match the criteria

    Example:
        >>> tree = MultiPathTree("FileSystem")
        >>> tree.create_directory("docs")
        'docs'
        >>> [d.get_path() for d in walk_directories(tree, min_depth=1)]
        ['docs']
    """
    start = _root_directory(root)
    traverser = create_traverser(strategy)

    for directory, _ in traverser.traverse(start, max_depth=max_depth, min_depth=min_depth):
        # A hidden directory hides its whole subtree
        if not include_hidden and _is_hidden_below(directory, start):
            continue
        if include_filter is not None and not include_filter(directory):
            continue
        yield directory


def count_directories(root: Union[PathTree, Directory], **kwargs) -> int:
    """Count directories that match criteria.

    Args:
        root: Tree or directory to start from
        **kwargs: Traversal options (see walk_directories)

    Returns:
        Number of directories that match criteria
    """
    count = 0
    for _ in walk_directories(root, **kwargs):
        count += 1
    return count


def find_directories(
    root: Union[PathTree, Directory],
    predicate: Callable[[Directory], bool],
    **kwargs
) -> Iterator[Directory]:
    """Find directories that match a predicate.

    Example:
        >>> for directory in find_directories(tree, lambda d: d.value_count() > 0):
        ...     print(directory.get_path())
    """
    kwargs['include_filter'] = predicate
    yield from walk_directories(root, **kwargs)


def get_tree_paths(root: Union[PathTree, Directory], **kwargs) -> Iterator[str]:
    """Get the cached path of each directory below ``root``.

    The starting directory itself is skipped unless ``min_depth=0`` is
    passed explicitly.
    """
    kwargs.setdefault('min_depth', 1)
    for directory in walk_directories(root, **kwargs):
        yield directory.get_path()


def get_leaf_directories(root: Union[PathTree, Directory], **kwargs) -> Iterator[Directory]:
    """Get all directories without subdirectories."""
    for directory in walk_directories(root, **kwargs):
        if not directory.children:
            yield directory


def get_tree_stats(root: Union[PathTree, Directory], **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Depths are relative to ``root``.

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Directories: {stats['total_directories']}")
    """
    stats = {
        'total_directories': 0,
        'leaf_directories': 0,
        'total_values': 0,
        'total_children': 0,
        'max_depth': 0,
        'depths': {}
    }

    start = _root_directory(root)
    base_depth = start.get_depth()

    for directory in walk_directories(start, **kwargs):
        depth = directory.get_depth() - base_depth
        stats['total_directories'] += 1
        stats['total_values'] += directory.value_count()

        if not directory.children:
            stats['leaf_directories'] += 1
        stats['total_children'] += len(directory.children)

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_directories'] = stats['total_directories'] - stats['leaf_directories']
    stats['average_branching'] = (
        stats['total_children'] / stats['internal_directories']
        if stats['internal_directories'] > 0 else 0
    )

    return stats


# Helper functions

def _root_directory(root: Union[PathTree, Directory]) -> Directory:
    if isinstance(root, PathTree):
        return root.directory
    if isinstance(root, Directory):
        return root
    raise TypeError(f"Expected a PathTree or Directory, got {type(root).__name__}")


def _is_hidden_below(directory: Directory, start: Directory) -> bool:
    """Check the path segments between ``start`` and ``directory``."""
    if directory is start:
        return False
    naming = directory.naming
    relative = directory.get_path()[len(start.get_path()):].lstrip(naming.separator)
    return any(naming.is_hidden(segment) for segment in relative.split(naming.separator))
