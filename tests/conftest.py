"""
Pytest configuration and shared fixtures.
"""

import pytest
from unittest.mock import MagicMock

from terminal_cv.adapters.filesystem.static_tree_adapter import StaticTreeAdapter
from terminal_cv.container import DependencyContainer
from terminal_cv.data.filesystem import FILE_SYSTEM
from terminal_cv.entities.session import Session
from terminal_cv.use_cases.terminal.handle_key import HandleKeyUseCase
from terminal_cv.use_cases.terminal.interpreter import CommandInterpreter
from terminal_cv.use_cases.terminal.submit_command import SubmitCommandUseCase


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def small_tree():
    """
    A small tree literal independent of the CV content.

    Returns:
        Nested literal with a file at the root and a two-level directory
    """
    return {
        "~": {
            "type": "directory",
            "content": {
                "readme.txt": {"type": "file", "content": "hello"},
                "docs": {
                    "type": "directory",
                    "content": {
                        "guide.txt": {"type": "file", "content": "guide"},
                        "api": {
                            "type": "directory",
                            "content": {
                                "index.txt": {"type": "file", "content": "index"}
                            },
                        },
                    },
                },
            },
        }
    }


@pytest.fixture
def tree(mock_logger):
    """Static tree adapter over the CV dataset."""
    return StaticTreeAdapter(FILE_SYSTEM, mock_logger)


@pytest.fixture
def session():
    return Session("test-session")


@pytest.fixture
def interpreter(tree, mock_logger):
    return CommandInterpreter(tree, "visitor - Guest User", mock_logger)


@pytest.fixture
def submit_command(interpreter, mock_logger):
    return SubmitCommandUseCase(interpreter, mock_logger)


@pytest.fixture
def handle_key(submit_command, interpreter, mock_logger):
    return HandleKeyUseCase(submit_command, interpreter.command_names(), mock_logger)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
