"""Testing utilities for DeepContext import analysis."""

from .fixtures import create_project_tree, create_tsconfig
from .mocks import MemoryFileSystem

__all__ = [
    "MemoryFileSystem",
    "create_project_tree",
    "create_tsconfig",
]
