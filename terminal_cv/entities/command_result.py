"""
Command result entities returned by the interpreter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from terminal_cv.entities.node import Node, NodeKind


class ResultType(str, Enum):
    """How a result is rendered by the terminal."""

    SUCCESS = "success"
    ERROR = "error"
    CONTENT = "content"
    FILES = "files"


class ErrorKind(str, Enum):
    """Recoverable command failures, rendered inline."""

    UNKNOWN_COMMAND = "unknown_command"
    MISSING_ARGUMENT = "missing_argument"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"


@dataclass(frozen=True)
class ListingEntry:
    name: str
    kind: NodeKind

    @classmethod
    def from_node(cls, node: Node) -> "ListingEntry":
        return cls(name=node.name, kind=node.kind)


@dataclass(frozen=True)
class CommandResult:
    type: ResultType
    output: str = ""
    entries: tuple[ListingEntry, ...] = ()
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, output: str = "") -> "CommandResult":
        return cls(type=ResultType.SUCCESS, output=output)

    @classmethod
    def content_of(cls, text: str) -> "CommandResult":
        return cls(type=ResultType.CONTENT, output=text)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "CommandResult":
        return cls(type=ResultType.ERROR, output=message, error=kind)

    @classmethod
    def listing(cls, nodes: Iterable[Node]) -> "CommandResult":
        entries = tuple(ListingEntry.from_node(node) for node in nodes)
        # Plain-text form for consumers that do not render entries
        output = "  ".join(entry.name for entry in entries)
        return cls(type=ResultType.FILES, output=output, entries=entries)

    @property
    def is_error(self) -> bool:
        return self.type is ResultType.ERROR


@dataclass(frozen=True)
class HistoryEntry:
    """One displayed line of the terminal: prompt, typed input and its result."""

    prompt: str
    input: str
    result: CommandResult
