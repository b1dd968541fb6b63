"""
Use case for submitting a typed line to a terminal session.
"""

import logging
from typing import Optional

from terminal_cv.entities.command_result import HistoryEntry
from terminal_cv.entities.session import Session
from terminal_cv.exceptions import BaseAppError, CommandExecutionError
from terminal_cv.use_cases.terminal.interpreter import (
    CommandInterpreter,
    CommandName,
    parse_line,
)


class SubmitCommandUseCase:
    """Use case run when the user presses Enter."""

    def __init__(
        self,
        interpreter: CommandInterpreter,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            interpreter: Interpreter executing the line
            logger: Logger instance to use for logging
        """
        self._interpreter = interpreter
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, line: str) -> Optional[HistoryEntry]:
        """
        Execute a line and record it in the session.

        The entry is appended to the displayed entries (except for 'clear',
        which leaves the display empty) and the line to the recall history.
        The input field is emptied and suggestions hidden.

        Args:
            session: Target session
            line: Raw input line

        Returns:
            The recorded entry, or None if the line was blank

        Raises:
            CommandExecutionError: If the interpreter fails unexpectedly
        """
        text = line.strip()
        if not text:
            return None

        prompt = session.prompt
        try:
            result = self._interpreter.execute(text, session)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error executing '{text}': {e}")
            raise CommandExecutionError(f"Failed to execute '{text}': {str(e)}")
        entry = HistoryEntry(prompt=prompt, input=text, result=result)

        name, _ = parse_line(text)
        if name != CommandName.CLEAR.value:
            session.record(entry)
        session.history.append(text)
        session.input_value = ""
        session.suggestions = []

        if result.is_error:
            self._logger.info(f"Command '{text}' failed: {result.error.value}")
        return entry
