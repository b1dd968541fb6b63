"""
Tree repository port interface defining the contract for the virtual filesystem.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from terminal_cv.entities.node import Directory, Node


class TreeRepositoryPort(ABC):
    """Port interface for read-only access to the static tree."""

    @abstractmethod
    def resolve(self, path: str, cwd: Sequence[str]) -> Optional[Node]:
        """
        Resolve a path string to a node.

        Args:
            path: Absolute ('/...' or '~/...') or relative path
            cwd: Segments of the current directory, root segment first

        Returns:
            The resolved Node, or None if any segment does not exist
        """
        pass

    @abstractmethod
    def get_directory(self, cwd: Sequence[str]) -> Optional[Directory]:
        """
        Get the directory designated by a sequence of path segments.

        Args:
            cwd: Path segments, root segment first

        Returns:
            The Directory, or None if the segments do not lead to one
        """
        pass
