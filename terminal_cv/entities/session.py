"""
Terminal session entity.
"""

import threading
import uuid
from typing import Optional

from terminal_cv.entities.command_result import HistoryEntry

ROOT_SEGMENT = "~"
PATH_SEPARATOR = "/"


class CommandHistory:
    """
    Append-only list of submitted lines with a recall cursor.

    The cursor stays within [0, len(lines)]; len(lines) means "past the newest
    line", which is where it sits after every submission.
    """

    def __init__(self):
        self._lines: list[str] = []
        self._cursor = 0

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def cursor(self) -> int:
        return self._cursor

    def append(self, line: str) -> None:
        self._lines.append(line)
        self._cursor = len(self._lines)

    def recall_previous(self) -> Optional[str]:
        """
        Step back to the previous line.

        Returns:
            The recalled line, or None when already at the oldest one
        """
        if self._cursor > 0:
            self._cursor -= 1
            return self._lines[self._cursor]
        return None

    def recall_next(self) -> str:
        """
        Step forward to the next line.

        Returns:
            The recalled line, or an empty string once past the newest one
        """
        if self._cursor < len(self._lines) - 1:
            self._cursor += 1
            return self._lines[self._cursor]
        self._cursor = len(self._lines)
        return ""


class Session:
    """
    Mutable state of one terminal: current path, recall history, displayed
    entries and the line being typed.
    """

    def __init__(self, session_id: Optional[str] = None):
        """
        Initialize the Session entity.

        Args:
            session_id: Identifier to use; a random one is generated if omitted
        """
        self.id = session_id or uuid.uuid4().hex
        self.history = CommandHistory()
        self.input_value = ""
        self.suggestions: list[str] = []
        self._path: list[str] = [ROOT_SEGMENT]
        self._entries: list[HistoryEntry] = []
        # held while a request mutates this session
        self.lock = threading.Lock()

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self._path)

    @property
    def depth(self) -> int:
        """Number of segments below the root."""
        return len(self._path) - 1

    @property
    def prompt(self) -> str:
        return PATH_SEPARATOR.join(self._path)

    @property
    def cwd(self) -> str:
        return PATH_SEPARATOR + self.prompt

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def enter(self, segment: str) -> None:
        self._path.append(segment)

    def leave(self) -> None:
        # no-op at the root
        if len(self._path) > 1:
            self._path.pop()

    def reset_path(self) -> None:
        self._path = [ROOT_SEGMENT]

    def record(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def clear_entries(self) -> None:
        self._entries.clear()

    def __repr__(self) -> str:
        return f"Session(id='{self.id}', cwd='{self.cwd}')"
