"""
Custom exceptions for the application.

Command failures (unknown command, missing argument, ...) are not exceptions:
they travel as error results and are rendered inline by the terminal.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileSystemError(BaseAppError):
    """Exception raised when the static filesystem tree is malformed."""

    pass


class SessionNotFoundError(BaseAppError):
    """Exception raised when a terminal session id is unknown."""

    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandExecutionError(BaseAppError):
    """Exception raised when a command line cannot be executed."""

    pass


class SessionStoreError(BaseAppError):
    """Exception raised when the session store fails."""

    pass
