"""
Tests for the CommandInterpreter.
"""

import pytest

from terminal_cv.adapters.filesystem.static_tree_adapter import StaticTreeAdapter
from terminal_cv.entities.command_result import (
    CommandResult,
    ErrorKind,
    HistoryEntry,
    ListingEntry,
    ResultType,
)
from terminal_cv.entities.node import NodeKind
from terminal_cv.use_cases.terminal.interpreter import (
    HELP_TEXT,
    CommandInterpreter,
    parse_line,
)

ABOUT_TEXT = """Samuel Lefcourt
--------------
PhD Candidate in Computer Science
Specializing in AI for Public Health and Security
Contact: slefcourt12@gmail.com
Location: Baltimore, MD"""


class TestParseLine:
    def test_splits_on_whitespace(self):
        assert parse_line("  ls   education  ") == ("ls", ["education"])

    def test_blank_line(self):
        assert parse_line("   ") == ("", [])


class TestDispatch:
    """Test cases for command lookup."""

    def test_command_names_in_completion_order(self, interpreter):
        assert interpreter.command_names() == [
            "help",
            "clear",
            "ls",
            "cat",
            "cd",
            "pwd",
            "whoami",
        ]

    def test_unknown_command(self, interpreter, session):
        session.enter("education")
        session.record(HistoryEntry("~", "pwd", CommandResult.success("/~")))

        result = interpreter.execute("rm -rf /", session)

        assert result.type is ResultType.ERROR
        assert result.error is ErrorKind.UNKNOWN_COMMAND
        assert result.output == "Command not found: rm"
        assert session.path == ("~", "education")
        assert len(session.entries) == 1

    def test_command_names_are_case_sensitive(self, interpreter, session):
        result = interpreter.execute("LS", session)

        assert result.error is ErrorKind.UNKNOWN_COMMAND

    def test_blank_line_is_empty_success(self, interpreter, session):
        assert interpreter.execute("   ", session) == CommandResult.success()

    def test_execution_is_logged(self, interpreter, session, mock_logger):
        interpreter.execute("pwd", session)

        mock_logger.info.assert_any_call("Executing command: pwd")


class TestSimpleCommands:
    def test_help(self, interpreter, session):
        result = interpreter.execute("help", session)

        assert result == CommandResult.success(HELP_TEXT)
        for name in interpreter.command_names():
            assert name in result.output

    def test_whoami(self, interpreter, session):
        assert interpreter.execute("whoami", session).output == "visitor - Guest User"

    def test_pwd_at_root(self, interpreter, session):
        assert interpreter.execute("pwd", session).output == "/~"

    def test_clear_empties_displayed_entries_only(self, interpreter, session):
        session.enter("education")
        session.record(HistoryEntry("~", "ls", CommandResult.success()))
        session.history.append("ls")

        result = interpreter.execute("clear", session)

        assert result == CommandResult.success()
        assert session.entries == []
        assert session.history.lines == ["ls"]
        assert session.path == ("~", "education")


class TestLs:
    """Test cases for the ls command."""

    def test_ls_current_directory(self, interpreter, session):
        result = interpreter.execute("ls", session)

        assert result.type is ResultType.FILES
        assert result.entries == (
            ListingEntry("about.txt", NodeKind.FILE),
            ListingEntry("education", NodeKind.DIRECTORY),
            ListingEntry("skills.txt", NodeKind.FILE),
            ListingEntry("publications", NodeKind.DIRECTORY),
        )
        assert result.output == "about.txt  education  skills.txt  publications"

    def test_ls_education_from_root(self, interpreter, session):
        result = interpreter.execute("ls education", session)

        assert result.entries == (
            ListingEntry("phd.txt", NodeKind.FILE),
            ListingEntry("masters.txt", NodeKind.FILE),
        )

    def test_ls_never_changes_path(self, interpreter, session):
        interpreter.execute("ls education", session)
        interpreter.execute("ls publications", session)
        interpreter.execute("ls missing", session)

        assert session.path == ("~",)

    def test_ls_inside_subdirectory(self, interpreter, session):
        session.enter("publications")

        result = interpreter.execute("ls", session)

        assert [e.name for e in result.entries] == ["paper1.txt"]

    def test_ls_absolute_path_from_subdirectory(self, interpreter, session):
        session.enter("publications")

        result = interpreter.execute("ls ~/education", session)

        assert [e.name for e in result.entries] == ["phd.txt", "masters.txt"]

    def test_ls_missing_directory(self, interpreter, session):
        result = interpreter.execute("ls missing", session)

        assert result.error is ErrorKind.NOT_FOUND
        assert result.output == "ls: directory not found: missing"

    def test_ls_on_file(self, interpreter, session):
        result = interpreter.execute("ls about.txt", session)

        assert result.error is ErrorKind.NOT_A_DIRECTORY
        assert result.output == "ls: not a directory: about.txt"

    def test_ls_nested_file_path(self, interpreter, session):
        result = interpreter.execute("ls education/phd.txt", session)

        assert result.error is ErrorKind.NOT_A_DIRECTORY


class TestCat:
    """Test cases for the cat command."""

    def test_cat_about_at_root(self, interpreter, session):
        result = interpreter.execute("cat about.txt", session)

        assert result == CommandResult.content_of(ABOUT_TEXT)

    def test_cat_without_argument(self, interpreter, session):
        result = interpreter.execute("cat", session)

        assert result.error is ErrorKind.MISSING_ARGUMENT
        assert result.output == "Usage: cat <filename>"

    def test_cat_directory(self, interpreter, session):
        result = interpreter.execute("cat education", session)

        assert result.error is ErrorKind.IS_A_DIRECTORY
        assert result.output == "Error: education is a directory"

    def test_cat_missing_file(self, interpreter, session):
        result = interpreter.execute("cat missing.txt", session)

        assert result.error is ErrorKind.NOT_FOUND
        assert result.output == "File not found: missing.txt"

    def test_cat_only_looks_in_current_directory(self, interpreter, session):
        result = interpreter.execute("cat education/phd.txt", session)

        assert result.error is ErrorKind.NOT_FOUND

    def test_cat_in_subdirectory(self, interpreter, session):
        session.enter("education")

        result = interpreter.execute("cat masters.txt", session)

        assert result.type is ResultType.CONTENT
        assert result.output.startswith("MS in Computer Science (Machine Learning)")

    def test_cat_uses_first_argument(self, interpreter, session):
        result = interpreter.execute("cat skills.txt about.txt", session)

        assert result.output.startswith("Technical Skills")


class TestCd:
    """Test cases for the cd command."""

    def test_cd_into_directory(self, interpreter, session):
        result = interpreter.execute("cd education", session)

        assert result == CommandResult.success()
        assert session.path == ("~", "education")

    def test_cd_parent_at_root_is_noop(self, interpreter, session):
        result = interpreter.execute("cd ..", session)

        assert result == CommandResult.success()
        assert session.path == ("~",)

    def test_cd_parent_pops_one_segment(self, interpreter, session):
        interpreter.execute("cd publications", session)

        interpreter.execute("cd ..", session)

        assert session.depth == 0

    def test_cd_parent_from_nested_directory(self, small_tree, mock_logger, session):
        interpreter = CommandInterpreter(
            StaticTreeAdapter(small_tree, mock_logger), "guest", mock_logger
        )
        interpreter.execute("cd docs", session)
        interpreter.execute("cd api", session)

        result = interpreter.execute("cd ..", session)

        assert result == CommandResult.success()
        assert session.depth == 1
        assert session.path == ("~", "docs")
        assert interpreter.execute("pwd", session).output == "/~/docs"
        assert [entry.name for entry in interpreter.execute("ls", session).entries] == [
            "guide.txt",
            "api",
        ]

    @pytest.mark.parametrize("line", ["cd", "cd ~"])
    def test_cd_home(self, interpreter, session, line):
        interpreter.execute("cd education", session)

        interpreter.execute(line, session)

        assert session.path == ("~",)

    def test_cd_missing(self, interpreter, session):
        result = interpreter.execute("cd missing", session)

        assert result.error is ErrorKind.NOT_FOUND
        assert result.output == "Directory not found: missing"
        assert session.path == ("~",)

    def test_cd_into_file(self, interpreter, session):
        result = interpreter.execute("cd about.txt", session)

        assert result.error is ErrorKind.NOT_A_DIRECTORY
        assert result.output == "Not a directory: about.txt"
        assert session.path == ("~",)

    def test_cd_nested_path_is_not_followed(self, interpreter, session):
        result = interpreter.execute("cd education/..", session)

        assert result.error is ErrorKind.NOT_FOUND
        assert session.path == ("~",)

    def test_cd_sibling_requires_parent_first(self, interpreter, session):
        interpreter.execute("cd education", session)

        result = interpreter.execute("cd publications", session)

        assert result.error is ErrorKind.NOT_FOUND
        assert session.path == ("~", "education")

    def test_pwd_reflects_accumulated_segments(self, interpreter, session):
        interpreter.execute("cd education", session)

        assert interpreter.execute("pwd", session).output == "/~/education"

        interpreter.execute("cd ..", session)
        interpreter.execute("cd publications", session)

        assert interpreter.execute("pwd", session).output == "/~/publications"
