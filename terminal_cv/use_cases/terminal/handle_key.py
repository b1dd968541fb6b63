"""
Use case for key events on the terminal input line (submit, recall, completion).
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from terminal_cv.entities.session import Session
from terminal_cv.use_cases.terminal.submit_command import SubmitCommandUseCase


class Key(str, Enum):
    """Keys the input line reacts to."""

    ENTER = "Enter"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    TAB = "Tab"


class HandleKeyUseCase:
    """Applies one key press to the input line of a session."""

    def __init__(
        self,
        submit_command: SubmitCommandUseCase,
        command_names: Sequence[str],
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            submit_command: Use case run on Enter
            command_names: Completion candidates, in suggestion order
            logger: Logger instance to use for logging
        """
        self._submit_command = submit_command
        self._command_names = list(command_names)
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, session: Session, key: Key, input_value: Optional[str] = None
    ) -> Session:
        """
        Apply a key press.

        Args:
            session: Target session
            key: Pressed key
            input_value: Current content of the input field, if the caller tracks it

        Returns:
            The updated session
        """
        if input_value is not None:
            session.input_value = input_value

        if key is Key.ENTER:
            self._submit_command.execute(session, session.input_value)
        elif key is Key.ARROW_UP:
            recalled = session.history.recall_previous()
            if recalled is not None:
                session.input_value = recalled
        elif key is Key.ARROW_DOWN:
            session.input_value = session.history.recall_next()
        elif key is Key.TAB:
            self.complete(session)
        return session

    def complete(self, session: Session) -> list[str]:
        """
        Complete the command token of the input line.

        A single match fills the input with the command and a trailing space;
        several matches are exposed as suggestions without touching the input.

        Returns:
            The matching command names
        """
        token = session.input_value.split(" ")[0]
        matches = [name for name in self._command_names if name.startswith(token)]
        if len(matches) == 1:
            session.input_value = matches[0] + " "
            session.suggestions = []
        elif len(matches) > 1:
            session.suggestions = matches
        self._logger.debug(f"Completion for '{token}': {matches}")
        return matches

    def choose_suggestion(self, session: Session, suggestion: str) -> Session:
        """
        Fill the input with one of the displayed suggestions.

        Raises:
            ValueError: If the suggestion is not currently displayed
        """
        if suggestion not in session.suggestions:
            raise ValueError(f"Not a current suggestion: {suggestion}")
        session.input_value = suggestion + " "
        session.suggestions = []
        return session
