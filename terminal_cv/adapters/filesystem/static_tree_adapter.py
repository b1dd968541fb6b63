"""
In-memory tree adapter built from a nested literal.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from typing_extensions import override

from terminal_cv.entities.node import Directory, File, Node, NodeKind
from terminal_cv.entities.session import PATH_SEPARATOR, ROOT_SEGMENT
from terminal_cv.exceptions import FileSystemError
from terminal_cv.ports.filesystem.tree_repository_port import TreeRepositoryPort


class StaticTreeAdapter(TreeRepositoryPort):
    """
    Static implementation of the tree repository port.

    The literal has the shape ``{"~": {"type": "directory", "content": {...}}}``
    where every entry is either ``{"type": "file", "content": str}`` or a
    nested directory of the same shape.
    """

    def __init__(
        self,
        tree: Mapping[str, Any],
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the adapter and build the node tree.

        Args:
            tree: Nested literal holding the single root directory
            logger: Logger instance to use for logging. If None, a default logger will be created.

        Raises:
            FileSystemError: If the literal is malformed
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        if ROOT_SEGMENT not in tree:
            raise FileSystemError(f"Tree literal must have a '{ROOT_SEGMENT}' root")
        root = self._build_node(ROOT_SEGMENT, tree[ROOT_SEGMENT])
        if not isinstance(root, Directory):
            raise FileSystemError("Tree root must be a directory")
        self._root = root

    def _build_node(self, name: str, entry: Any) -> Node:
        """
        Convert one literal entry (and its children) to a Node.

        Args:
            name: Entry name
            entry: Literal entry with 'type' and 'content' keys

        Returns:
            The built Node
        """
        if not isinstance(entry, Mapping):
            raise FileSystemError(f"Entry '{name}' must be a mapping")

        kind = entry.get("type")
        content = entry.get("content")
        if kind == NodeKind.FILE.value:
            return File(name, content)
        if kind == NodeKind.DIRECTORY.value:
            if not isinstance(content, Mapping):
                raise FileSystemError(f"Directory '{name}' content must be a mapping")
            return Directory(
                name,
                [self._build_node(child, value) for child, value in content.items()],
            )
        raise FileSystemError(f"Entry '{name}' has unknown type: {kind}")

    def _walk(self, segments: Sequence[str]) -> Optional[Node]:
        node: Node = self._root
        for segment in segments:
            if not isinstance(node, Directory):
                return None
            child = node.get(segment)
            if child is None:
                return None
            node = child
        return node

    @staticmethod
    def _split(path: str) -> list[str]:
        return [
            part
            for part in path.split(PATH_SEPARATOR)
            if part and part != ROOT_SEGMENT
        ]

    @override
    def resolve(self, path: str, cwd: Sequence[str]) -> Optional[Node]:
        """
        Resolve a path string to a node.

        Paths starting with '/' or the root marker are walked from the root,
        anything else from cwd. Only names are matched: '.' and '..' are not
        special here.

        Args:
            path: Path to resolve
            cwd: Segments of the current directory, root segment first

        Returns:
            The resolved Node, or None
        """
        absolute = (
            path.startswith(PATH_SEPARATOR)
            or path == ROOT_SEGMENT
            or path.startswith(ROOT_SEGMENT + PATH_SEPARATOR)
        )
        base = [] if absolute else [s for s in cwd if s != ROOT_SEGMENT]
        node = self._walk(base + self._split(path))
        if node is None:
            self._logger.debug(f"Could not resolve path '{path}' from {list(cwd)}")
        return node

    @override
    def get_directory(self, cwd: Sequence[str]) -> Optional[Directory]:
        node = self._walk([s for s in cwd if s != ROOT_SEGMENT])
        return node if isinstance(node, Directory) else None
