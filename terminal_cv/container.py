"""
Dependency injection container for managing application dependencies.
"""

import logging

from terminal_cv.adapters.filesystem.static_tree_adapter import StaticTreeAdapter
from terminal_cv.adapters.sessions.in_memory_session_repository import (
    InMemorySessionRepository,
)
from terminal_cv.config.settings import settings
from terminal_cv.data.filesystem import FILE_SYSTEM
from terminal_cv.ports.filesystem.tree_repository_port import TreeRepositoryPort
from terminal_cv.ports.sessions.session_repository_port import SessionRepositoryPort
from terminal_cv.use_cases.sessions.manage_sessions import ManageSessionsUseCase
from terminal_cv.use_cases.terminal.handle_key import HandleKeyUseCase
from terminal_cv.use_cases.terminal.interpreter import CommandInterpreter
from terminal_cv.use_cases.terminal.submit_command import SubmitCommandUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_tree_repository(self) -> TreeRepositoryPort:
        """
        Get the static tree adapter instance.

        Returns:
            TreeRepositoryPort implementation
        """
        if "tree_repository" not in self._instances:
            self._instances["tree_repository"] = StaticTreeAdapter(
                FILE_SYSTEM, self._logger
            )
        return self._instances["tree_repository"]

    def get_session_repository(self) -> SessionRepositoryPort:
        """
        Get session repository instance.

        Returns:
            SessionRepositoryPort implementation
        """
        if "session_repository" not in self._instances:
            self._instances["session_repository"] = InMemorySessionRepository(
                self._logger, settings.max_sessions
            )
        return self._instances["session_repository"]

    def get_command_interpreter(self) -> CommandInterpreter:
        """
        Get the command interpreter with the tree injected.

        Returns:
            Configured CommandInterpreter
        """
        if "command_interpreter" not in self._instances:
            self._instances["command_interpreter"] = CommandInterpreter(
                self.get_tree_repository(), settings.whoami, self._logger
            )
        return self._instances["command_interpreter"]

    def get_submit_command_use_case(self) -> SubmitCommandUseCase:
        if "submit_command_use_case" not in self._instances:
            self._instances["submit_command_use_case"] = SubmitCommandUseCase(
                self.get_command_interpreter(), self._logger
            )
        return self._instances["submit_command_use_case"]

    def get_handle_key_use_case(self) -> HandleKeyUseCase:
        if "handle_key_use_case" not in self._instances:
            interpreter = self.get_command_interpreter()
            self._instances["handle_key_use_case"] = HandleKeyUseCase(
                self.get_submit_command_use_case(),
                interpreter.command_names(),
                self._logger,
            )
        return self._instances["handle_key_use_case"]

    def get_manage_sessions_use_case(self) -> ManageSessionsUseCase:
        """
        Get the session lifecycle use case with injected dependencies.

        Returns:
            Configured ManageSessionsUseCase
        """
        if "manage_sessions_use_case" not in self._instances:
            self._instances["manage_sessions_use_case"] = ManageSessionsUseCase(
                self.get_session_repository(), self._logger
            )
        return self._instances["manage_sessions_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
