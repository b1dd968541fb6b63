"""
Rich renderables for terminal entries.
"""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.text import Text

from terminal_cv.entities.command_result import CommandResult, HistoryEntry, ResultType
from terminal_cv.entities.node import NodeKind

DIRECTORY_STYLE = "bold blue"
ERROR_STYLE = "red"
PATH_STYLE = "magenta"
PROMPT_STYLE = "green"


def welcome_banner(owner: str) -> Text:
    return Text(
        f"Welcome to {owner}'s Terminal CV!\nType 'help' for available commands.",
        style=PROMPT_STYLE,
    )


def prompt_text(prompt: str, command: str = "") -> Text:
    text = Text()
    text.append("> ", style=PROMPT_STYLE)
    text.append(prompt, style=PATH_STYLE)
    text.append(" $ ", style=PROMPT_STYLE)
    text.append(command)
    return text


def render_result(result: CommandResult) -> RenderableType:
    if result.type is ResultType.FILES:
        return Columns(
            [
                Text(
                    entry.name,
                    style=DIRECTORY_STYLE if entry.kind is NodeKind.DIRECTORY else "",
                )
                for entry in result.entries
            ],
            padding=(0, 4),
        )
    if result.type is ResultType.ERROR:
        return Text(result.output, style=ERROR_STYLE)
    # content and success are printed verbatim
    return Text(result.output)


def render_entry(entry: HistoryEntry) -> RenderableType:
    """Prompt line echoing the input, followed by the result if it printed anything."""
    prompt = prompt_text(entry.prompt, entry.input)
    if not (entry.result.output or entry.result.entries):
        return prompt
    return Group(prompt, render_result(entry.result))
