"""Configuration system for PathTreeLib.

This module defines the naming conventions directories follow (separator,
self alias, hidden and anonymous name markers), how listings are drawn and
which traversal strategies are available.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """How to walk a directory subtree.

    Different strategies are optimal for different use cases.
    """
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level


@dataclass(frozen=True)
class NamingConfig:
    """Naming conventions shared by every directory of a tree.

    The marker strings are conventions, not hard requirements: a directory
    class can swap them by overriding its ``naming`` class attribute.
    """

    separator: str = "/"                        # Path segment delimiter
    self_alias: str = "."                       # "This directory, no descent"
    hidden_prefix: str = "."                    # Names skipped by listings
    anonymous_prefix: str = ".||#:"             # Prefix of generated names
    max_name_attempts: int = 100                # Retry bound for generation
    unassigned_name: str = "UNASSIGNED DIRECTORY"

    def is_hidden(self, name: str) -> bool:
        """Check if a name is hidden from human-readable listings."""
        return bool(self.hidden_prefix) and name.startswith(self.hidden_prefix)

    def anonymous_name(self, index: int) -> str:
        """Build the generated name candidate for ``index``."""
        return f"{self.anonymous_prefix}{index}"

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.separator:
            errors.append("separator cannot be empty")

        if not self.self_alias:
            errors.append("self_alias cannot be empty")
        elif self.separator and self.separator in self.self_alias:
            errors.append("self_alias cannot contain the separator")

        if not self.anonymous_prefix:
            errors.append("anonymous_prefix cannot be empty")
        elif self.separator and self.separator in self.anonymous_prefix:
            errors.append("anonymous_prefix cannot contain the separator")

        if self.max_name_attempts <= 0:
            errors.append("max_name_attempts must be positive")

        return errors


DEFAULT_NAMING = NamingConfig()


@dataclass
class ListingConfig:
    """Configuration for the human-readable tree listing."""

    root_marker: str = "> "     # Written before the root name
    margin: str = "  "          # Left margin of every entry line
    indent: str = "|    "       # One per nesting level
    branch: str = "|-> "        # Written right before the entry name
    sort_entries: bool = True   # Alphabetical vs insertion order
    show_hidden: bool = False   # Include names starting with the hidden prefix

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not self.branch:
            errors.append("branch cannot be empty")
        if "\n" in self.margin + self.indent + self.branch:
            errors.append("margin, indent and branch must be single-line")
        return errors


__all__ = [
    'TraversalStrategy',
    'NamingConfig',
    'DEFAULT_NAMING',
    'ListingConfig',
]
