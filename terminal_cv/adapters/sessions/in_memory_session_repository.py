"""
Process-local session store.
"""

import logging
import threading
from collections import OrderedDict
from typing import Optional

from typing_extensions import override

from terminal_cv.entities.session import Session
from terminal_cv.ports.sessions.session_repository_port import SessionRepositoryPort

DEFAULT_MAX_SESSIONS = 1000


class InMemorySessionRepository(SessionRepositoryPort):
    """
    Keeps sessions in memory for the lifetime of the process.

    At most max_sessions are kept: storing one more evicts the least
    recently used session.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ):
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be positive, got {max_sessions}")
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, Session] = OrderedDict()
        self._lock = threading.Lock()

    @override
    def save(self, session: Session) -> None:
        evicted: list[str] = []
        with self._lock:
            self._sessions[session.id] = session
            self._sessions.move_to_end(session.id)
            while len(self._sessions) > self._max_sessions:
                session_id, _ = self._sessions.popitem(last=False)
                evicted.append(session_id)
        self._logger.debug(f"Stored session {session.id}")
        for session_id in evicted:
            self._logger.debug(f"Evicted least recently used session {session_id}")

    @override
    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
            return session

    @override
    def delete(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            self._logger.debug(f"Removed session {session_id}")
        return removed

    @override
    def count(self) -> int:
        with self._lock:
            return len(self._sessions)
