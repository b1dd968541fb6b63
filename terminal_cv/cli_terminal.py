import argparse
import logging
from typing import Optional

from rich.console import Console

from terminal_cv.config.settings import settings
from terminal_cv.container import container
from terminal_cv.entities.session import Session
from terminal_cv.ui.render import (
    prompt_text,
    render_entry,
    render_result,
    welcome_banner,
)
from terminal_cv.use_cases.terminal.interpreter import CommandName, parse_line


def _run_line(
    console: Console, session: Session, line: str, echo: bool = False
) -> None:
    """Submit a line; with echo the prompt line is printed along with the result."""
    prompt = session.prompt
    entry = container.get_submit_command_use_case().execute(session, line)
    if entry is None:
        if echo:
            console.print(prompt_text(prompt))
        return
    name, _ = parse_line(entry.input)
    if name == CommandName.CLEAR.value:
        console.clear()
    elif echo:
        console.print(render_entry(entry))
    elif entry.result.output or entry.result.entries:
        console.print(render_result(entry.result))


def main(argv: list[str] | None = None, console: Optional[Console] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="terminal-cv",
        description="Browse the CV from a simulated terminal.",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        help="Run this command and exit (may be repeated)",
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="Do not print the welcome banner"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log executed commands to stderr (overrides TERMINAL_CV_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if console is None:
        console = Console(soft_wrap=True)
    session = Session()

    if args.command:
        for line in args.command:
            _run_line(console, session, line, echo=True)
        return 0

    if not args.no_banner:
        console.print(welcome_banner(settings.owner))
    while True:
        try:
            line = console.input(prompt_text(session.prompt))
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        _run_line(console, session, line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
