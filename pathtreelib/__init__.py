"""PathTreeLib - In-memory path trees for storing generic data.

A path tree imitates a UNIX file system: named directories nest inside each
other and hold values ("files"), and everything is addressed with
slash-delimited paths.

Choose your storage policy:
━━━━━━━━━━━━━━━━━━━━━━━━━━
One value per directory:
    from pathtreelib import SinglePathTree

Named values per directory:
    from pathtreelib import MultiPathTree
━━━━━━━━━━━━━━━━━━━━━━━━━━

Example:
    >>> tree = MultiPathTree("FileSystem")
    >>> tree.create_directory("New_Folder")
    'New_Folder'
    >>> tree.insert_value("New_Folder/text.txt", "Hello World!")
    'text.txt'
    >>> print(tree.tree())
    > FileSystem
      |-> New_Folder
      |    |-> text.txt
"""

import logging

__version__ = "0.3.0"

from .config import DEFAULT_NAMING, ListingConfig, NamingConfig, TraversalStrategy
from .errors import (
    PathTreeError,
    DuplicateNameError,
    NameInUseError,
    InvalidPathError,
    NoDirectoryError,
    NoFileError,
    FileConflictError,
)
from .core import (
    Directory,
    SingleDirectory,
    MultiDirectory,
    PathTree,
    SinglePathTree,
    MultiPathTree,
)
from .render import render_listing
from .api import (
    walk_directories,
    count_directories,
    find_directories,
    get_tree_paths,
    get_leaf_directories,
    get_tree_stats,
)

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Config
    "NamingConfig",
    "DEFAULT_NAMING",
    "ListingConfig",
    "TraversalStrategy",
    # Errors
    "PathTreeError",
    "DuplicateNameError",
    "NameInUseError",
    "InvalidPathError",
    "NoDirectoryError",
    "NoFileError",
    "FileConflictError",
    # Core
    "Directory",
    "SingleDirectory",
    "MultiDirectory",
    "PathTree",
    "SinglePathTree",
    "MultiPathTree",
    # Listing
    "render_listing",
    # API
    "walk_directories",
    "count_directories",
    "find_directories",
    "get_tree_paths",
    "get_leaf_directories",
    "get_tree_stats",
]
