"""Core abstractions for PathTreeLib.

This module contains the directory policies, the tree handle, the path
resolver and the traversal strategies.
"""

from .directory import Directory
from .single import SingleDirectory
from .multi import MultiDirectory
from .tree import PathTree, SinglePathTree, MultiPathTree
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    "Directory",
    "SingleDirectory",
    "MultiDirectory",
    "PathTree",
    "SinglePathTree",
    "MultiPathTree",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
]
