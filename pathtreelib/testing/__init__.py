"""Testing helpers for PathTreeLib and its consumers."""

from .fixtures import DirectoryTestHelper

__all__ = ['DirectoryTestHelper']
