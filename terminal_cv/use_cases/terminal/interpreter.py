"""
Command interpreter: parses a typed line and dispatches it to a fixed set of handlers.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from terminal_cv.config.settings import DEFAULT_IDENTITY
from terminal_cv.entities.command_result import CommandResult, ErrorKind
from terminal_cv.entities.node import Directory
from terminal_cv.entities.session import ROOT_SEGMENT, Session
from terminal_cv.ports.filesystem.tree_repository_port import TreeRepositoryPort


class CommandName(str, Enum):
    """Commands understood by the terminal, in completion order."""

    HELP = "help"
    CLEAR = "clear"
    LS = "ls"
    CAT = "cat"
    CD = "cd"
    PWD = "pwd"
    WHOAMI = "whoami"


PARENT_SEGMENT = ".."

HELP_TEXT = """Available Commands:
------------------
help     - Show this help message
clear    - Clear the terminal
ls       - List directory contents
cd       - Change directory
cat      - View file contents
pwd      - Show current path
whoami   - Display user info

Examples:
ls
cat about.txt
cd education
pwd"""

Handler = Callable[[list[str], Session], CommandResult]


def parse_line(line: str) -> tuple[str, list[str]]:
    """
    Split a typed line into a command name and its arguments.

    Returns:
        (name, args); name is empty for a blank line
    """
    parts = line.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


class CommandInterpreter:
    """Executes one line against a session and returns a typed result."""

    def __init__(
        self,
        tree: TreeRepositoryPort,
        identity: str = DEFAULT_IDENTITY,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the interpreter.

        Args:
            tree: Repository exposing the static filesystem
            identity: Text printed by whoami
            logger: Logger instance to use for logging
        """
        self._tree = tree
        self._identity = identity
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[CommandName, Handler] = {
            CommandName.HELP: self._help,
            CommandName.CLEAR: self._clear,
            CommandName.LS: self._ls,
            CommandName.CAT: self._cat,
            CommandName.CD: self._cd,
            CommandName.PWD: self._pwd,
            CommandName.WHOAMI: self._whoami,
        }

    def command_names(self) -> list[str]:
        return [command.value for command in self._handlers]

    def execute(self, line: str, session: Session) -> CommandResult:
        """
        Execute a typed line.

        Args:
            line: Raw input line
            session: Session whose state the command reads and mutates

        Returns:
            The command result; failures are error results, never exceptions
        """
        name, args = parse_line(line)
        if not name:
            return CommandResult.success()

        try:
            command = CommandName(name)
        except ValueError:
            self._logger.info(f"Unknown command: {name}")
            return CommandResult.failure(
                ErrorKind.UNKNOWN_COMMAND, f"Command not found: {name}"
            )

        self._logger.info(f"Executing command: {line.strip()}")
        return self._handlers[command](args, session)

    # ----------------------------- handlers -----------------------------
    def _help(self, args: list[str], session: Session) -> CommandResult:
        return CommandResult.success(HELP_TEXT)

    def _clear(self, args: list[str], session: Session) -> CommandResult:
        session.clear_entries()
        return CommandResult.success()

    def _ls(self, args: list[str], session: Session) -> CommandResult:
        if args:
            target = self._tree.resolve(args[0], session.path)
            label = args[0]
        else:
            target = self._tree.get_directory(session.path)
            label = session.cwd

        if target is None:
            return CommandResult.failure(
                ErrorKind.NOT_FOUND, f"ls: directory not found: {label}"
            )
        if not isinstance(target, Directory):
            return CommandResult.failure(
                ErrorKind.NOT_A_DIRECTORY, f"ls: not a directory: {label}"
            )
        return CommandResult.listing(target.children())

    def _cat(self, args: list[str], session: Session) -> CommandResult:
        if not args:
            return CommandResult.failure(
                ErrorKind.MISSING_ARGUMENT, "Usage: cat <filename>"
            )

        # Only the current directory is searched: 'cat education/phd.txt' is not found.
        directory = self._tree.get_directory(session.path)
        node = directory.get(args[0]) if directory is not None else None
        if node is None:
            return CommandResult.failure(
                ErrorKind.NOT_FOUND, f"File not found: {args[0]}"
            )
        if isinstance(node, Directory):
            return CommandResult.failure(
                ErrorKind.IS_A_DIRECTORY, f"Error: {args[0]} is a directory"
            )
        return CommandResult.content_of(node.content)

    def _cd(self, args: list[str], session: Session) -> CommandResult:
        if not args or args[0] == ROOT_SEGMENT:
            session.reset_path()
            return CommandResult.success()

        if args[0] == PARENT_SEGMENT:
            session.leave()
            return CommandResult.success()

        directory = self._tree.get_directory(session.path)
        node = directory.get(args[0]) if directory is not None else None
        if node is None:
            return CommandResult.failure(
                ErrorKind.NOT_FOUND, f"Directory not found: {args[0]}"
            )
        if not isinstance(node, Directory):
            return CommandResult.failure(
                ErrorKind.NOT_A_DIRECTORY, f"Not a directory: {args[0]}"
            )
        session.enter(node.name)
        return CommandResult.success()

    def _pwd(self, args: list[str], session: Session) -> CommandResult:
        return CommandResult.success(session.cwd)

    def _whoami(self, args: list[str], session: Session) -> CommandResult:
        return CommandResult.success(self._identity)
