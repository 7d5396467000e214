#!/usr/bin/env python3
"""
Basic PathTreeLib usage.

This example demonstrates:
- Building a tree of directories and files
- Borrowing and removing by path
- Merging two trees and handling conflicts
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from pathtreelib import DuplicateNameError, MultiPathTree, get_tree_stats


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s | %(name)s | %(message)s")

    tree = MultiPathTree("FileSystem")
    tree.create_directory("New_Folder")
    tree.create_directory("New_Folder/Strings")
    tree.create_directory("Cool_Folder")
    tree.insert_value("New_Folder/Strings/text.txt", "Hello World!")

    print(tree.tree())
    print(tree.borrow_value("New_Folder/Strings/text.txt"))

    other = MultiPathTree("Other")
    other.create_directory("Cool_Folder")
    try:
        tree.merge_tree(other)
    except DuplicateNameError as e:
        print(f"Merge rejected: {e}")

    other.take_directory("Cool_Folder")
    other.create_directory("Extra")
    tree.merge_tree(other)

    print(tree.tree_dir())
    print(get_tree_stats(tree))


if __name__ == "__main__":
    main()
