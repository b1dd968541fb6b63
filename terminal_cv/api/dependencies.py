"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from terminal_cv.container import container
from terminal_cv.use_cases.sessions.manage_sessions import ManageSessionsUseCase
from terminal_cv.use_cases.terminal.handle_key import HandleKeyUseCase
from terminal_cv.use_cases.terminal.submit_command import SubmitCommandUseCase


def get_manage_sessions_uc() -> ManageSessionsUseCase:
    """
    Get the session lifecycle use case from the container.

    Returns:
        ManageSessionsUseCase: The session lifecycle use case instance
    """
    return container.get_manage_sessions_use_case()


def get_submit_command_uc() -> SubmitCommandUseCase:
    """
    Get the submit command use case from the container.

    Returns:
        SubmitCommandUseCase: The submit command use case instance
    """
    return container.get_submit_command_use_case()


def get_handle_key_uc() -> HandleKeyUseCase:
    """
    Get the key handling use case from the container.

    Returns:
        HandleKeyUseCase: The key handling use case instance
    """
    return container.get_handle_key_use_case()
