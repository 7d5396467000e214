"""Tree traversal strategies for PathTreeLib.

Traversers implement different algorithms for walking a directory subtree.
They only rely on ``Directory.children``, so they work with either storage
policy. Ownership is exclusive and there are no back references, which means
a subtree can never contain a cycle and no visited-set is needed.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy

if TYPE_CHECKING:
    from .directory import Directory

Visit = Tuple["Directory", int]


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Depths yielded are relative to the directory the traversal starts
    from, not the cached ``get_depth()`` of each directory. Subclasses only
    decide the visiting order; the depth window is applied here.
    """

    def traverse(self,
                 root: "Directory",
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Visit]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting directory for traversal
            max_depth: Deepest relative depth visited (None = unlimited)
            min_depth: Shallowest relative depth yielded

        Yields:
            Tuples of (directory, depth) where depth is relative to root
        """
        if max_depth is not None and max_depth < 0:
            return
        for directory, depth in self._walk(root, max_depth):
            if depth >= min_depth:
                yield (directory, depth)

    @abstractmethod
    def _walk(self, root: "Directory", max_depth: Optional[int]) -> Iterator[Visit]:
        """Yield every directory down to max_depth in this strategy's order."""
        pass

    @staticmethod
    def _below(directory: "Directory", depth: int, max_depth: Optional[int]) -> Iterable["Directory"]:
        # Children are pruned once the depth limit is reached
        if max_depth is not None and depth >= max_depth:
            return ()
        return directory.children.values()


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits all directories at depth N before visiting those at depth N+1.
    """

    def _walk(self, root, max_depth):
        pending = deque([(root, 0)])
        while pending:
            directory, depth = pending.popleft()
            yield (directory, depth)
            pending.extend((child, depth + 1) for child in self._below(directory, depth, max_depth))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Used by ``Directory.crawl()``.
    """

    def _walk(self, root, max_depth, depth=0):
        yield (root, depth)
        for child in self._below(root, depth, max_depth):
            yield from self._walk(child, max_depth, depth + 1)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for aggregating values bottom-up.
    """

    def _walk(self, root, max_depth, depth=0):
        for child in self._below(root, depth, max_depth):
            yield from self._walk(child, max_depth, depth + 1)
        yield (root, depth)


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Same order as breadth-first, but a whole level is collected before
    the next one is expanded.
    """

    def _walk(self, root, max_depth):
        level: List["Directory"] = [root]
        depth = 0
        while level:
            for directory in level:
                yield (directory, depth)
            level = [child for directory in level
                     for child in self._below(directory, depth, max_depth)]
            depth += 1


_TRAVERSERS = {
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}

# Long names accepted next to the enum values
_LONG_NAMES = {
    'dfs': 'dfs_pre',
    'breadth_first': 'bfs',
    'depth_first_pre': 'dfs_pre',
    'depth_first_post': 'dfs_post',
    'level_order': 'level',
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    key = strategy.lower()
    try:
        return TraversalStrategy(_LONG_NAMES.get(key, key))
    except ValueError:
        choices = [member.value for member in TraversalStrategy] + list(_LONG_NAMES)
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. Choose from: {', '.join(choices)}"
        ) from None


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy name or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()


__all__ = [
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'LevelOrderTraverser',
    'parse_strategy',
    'create_traverser',
]
