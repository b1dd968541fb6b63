"""
Use case for the lifecycle of terminal sessions.
"""

import logging
from typing import Optional

from terminal_cv.entities.session import Session
from terminal_cv.exceptions import SessionNotFoundError, SessionStoreError
from terminal_cv.ports.sessions.session_repository_port import SessionRepositoryPort


class ManageSessionsUseCase:
    """Creates, looks up and discards sessions."""

    def __init__(
        self,
        session_repository: SessionRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._session_repository = session_repository
        self._logger = logger or logging.getLogger(__name__)

    def create(self) -> Session:
        """
        Create and store a fresh session.

        Raises:
            SessionStoreError: If the session cannot be stored
        """
        try:
            session = Session()
            self._session_repository.save(session)
            live = self._session_repository.count()
        except SessionStoreError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating session: {e}")
            raise SessionStoreError(f"Failed to create session: {str(e)}")
        self._logger.info(f"Created session {session.id} ({live} live)")
        return session

    def get(self, session_id: str) -> Session:
        """
        Get a live session.

        Raises:
            SessionNotFoundError: If no session has this id
            SessionStoreError: If the lookup fails
        """
        try:
            session = self._session_repository.get(session_id)
        except SessionStoreError:
            raise
        except Exception as e:
            self._logger.error(f"Error loading session {session_id}: {e}")
            raise SessionStoreError(f"Failed to load session {session_id}: {str(e)}")
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        """
        Discard a session.

        Raises:
            SessionNotFoundError: If no session has this id
            SessionStoreError: If the removal fails
        """
        try:
            removed = self._session_repository.delete(session_id)
        except SessionStoreError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting session {session_id}: {e}")
            raise SessionStoreError(
                f"Failed to delete session {session_id}: {str(e)}"
            )
        if not removed:
            raise SessionNotFoundError(session_id)
        self._logger.info(f"Deleted session {session_id}")
