"""Test fixtures for PathTreeLib consumers.

These fixtures give controlled, read-only access to directory internals
for assertions, without making them part of the public API.
"""

from typing import Any, Dict, List

from ..core.directory import Directory
from ..core.resolver import join_path


class DirectoryTestHelper:
    """Public test fixture for structural verification.

    Example:
        tree = MultiPathTree("Root")
        helper = DirectoryTestHelper(tree.directory)

        before = helper.snapshot()
        with pytest.raises(DuplicateNameError):
            tree.merge_directory(donor)
        assert helper.snapshot() == before
        assert helper.check_consistency() == []
    """

    def __init__(self, directory: Directory):
        """Initialize with the directory to inspect.

        Args:
            directory: Root of the subtree under test
        """
        self._directory = directory

    def snapshot(self) -> Dict[str, Any]:
        """Capture the subtree as plain, comparable data.

        Returns:
            Nested dictionary containing for each directory:
            - name, path, depth: cached identity fields
            - values: the single value, or a copy of the file mapping
            - children: snapshots keyed by child name
        """
        return _snapshot(self._directory)

    def paths(self) -> List[str]:
        """Return cached paths of every directory below the root, sorted."""
        return sorted(directory.get_path() for directory in self._directory.crawl())

    def check_consistency(self) -> List[str]:
        """Verify cached path/depth against the actual nesting.

        Returns:
            List of problems found (empty if consistent)
        """
        problems: List[str] = []
        _check(self._directory, problems)
        return problems


def _snapshot(directory: Directory) -> Dict[str, Any]:
    if hasattr(directory, 'files'):
        values = dict(directory.files)
    else:
        values = getattr(directory, 'file', None)
    return {
        'name': directory.get_name(),
        'path': directory.get_path(),
        'depth': directory.get_depth(),
        'values': values,
        'children': {name: _snapshot(child) for name, child in directory.children.items()},
    }


def _check(directory: Directory, problems: List[str]) -> None:
    for name, child in directory.children.items():
        expected_path = join_path(directory.get_path(), name, directory.naming)
        if child.get_name() != name:
            problems.append(f"{expected_path}: cached name {child.get_name()!r}")
        if child.get_path() != expected_path:
            problems.append(f"{expected_path}: cached path {child.get_path()!r}")
        if child.get_depth() != directory.get_depth() + 1:
            problems.append(f"{expected_path}: cached depth {child.get_depth()}")
        _check(child, problems)
