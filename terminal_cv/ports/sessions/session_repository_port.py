"""
Session repository port interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from terminal_cv.entities.session import Session


class SessionRepositoryPort(ABC):
    """Port interface for storing live terminal sessions."""

    @abstractmethod
    def save(self, session: Session) -> None:
        """Store a session under its id, replacing any previous one."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[Session]:
        """Return the session with this id, or None."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """
        Remove a session.

        Returns:
            True if the session existed
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored sessions."""
        pass
