"""
Filesystem node entities (directories and files of the static CV tree).
"""

from enum import Enum
from typing import Iterable, Optional

from terminal_cv.exceptions import FileSystemError


class NodeKind(str, Enum):
    """Kind of a tree node."""

    DIRECTORY = "directory"
    FILE = "file"


class Node:
    """
    Base entity for an entry of the in-memory tree.
    """

    kind: NodeKind

    def __init__(self, name: str):
        """
        Initialize the Node entity.

        Args:
            name: Entry name inside its parent directory

        Raises:
            FileSystemError: If the name is empty or contains a separator
        """
        if not name or not isinstance(name, str):
            raise FileSystemError("Node name must be a non-empty string")

        if "/" in name:
            raise FileSystemError(f"Node name cannot contain '/': {name}")

        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name='{self.name}')"


class File(Node):
    """Leaf node owning an immutable text blob."""

    kind = NodeKind.FILE

    def __init__(self, name: str, content: str):
        super().__init__(name)
        if not isinstance(content, str):
            raise FileSystemError(f"File content must be text: {name}")
        self._content = content

    @property
    def content(self) -> str:
        return self._content


class Directory(Node):
    """Node mapping child names to nodes, in declaration order."""

    kind = NodeKind.DIRECTORY

    def __init__(self, name: str, children: Optional[Iterable[Node]] = None):
        """
        Initialize the Directory entity.

        Args:
            name: Directory name
            children: Child nodes, listed in this order

        Raises:
            FileSystemError: If two children share a name
        """
        super().__init__(name)
        self._children: dict[str, Node] = {}
        for child in children or []:
            if child.name in self._children:
                raise FileSystemError(
                    f"Duplicate entry '{child.name}' in directory '{name}'"
                )
            self._children[child.name] = child

    def get(self, name: str) -> Optional[Node]:
        """Return the immediate child called name, or None."""
        return self._children.get(name)

    def children(self) -> list[Node]:
        return list(self._children.values())
