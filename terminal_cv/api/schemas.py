"""
Pydantic models for API requests and responses.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from terminal_cv.entities.command_result import CommandResult, HistoryEntry
from terminal_cv.entities.session import Session


class ListingEntryInfo(BaseModel):
    """Schema for one entry of an ls listing."""

    name: str = Field(..., description="Entry name")
    kind: Literal["directory", "file"] = Field(..., description="Entry kind")


class CommandResultInfo(BaseModel):
    """Schema for a command result."""

    type: Literal["success", "error", "content", "files"] = Field(
        ..., description="How the result is rendered"
    )
    output: str = Field("", description="Text output or error message")
    entries: List[ListingEntryInfo] = Field(
        default_factory=list, description="Listing entries (type 'files' only)"
    )
    error: Optional[str] = Field(None, description="Error kind (type 'error' only)")

    @classmethod
    def from_entity(cls, result: CommandResult):
        """Create a CommandResultInfo schema from a CommandResult entity."""
        return cls(
            type=result.type.value,
            output=result.output,
            entries=[
                ListingEntryInfo(name=e.name, kind=e.kind.value) for e in result.entries
            ],
            error=result.error.value if result.error else None,
        )


class HistoryEntryInfo(BaseModel):
    """Schema for one displayed terminal entry."""

    prompt: str = Field(..., description="Path the command was typed at")
    input: str = Field(..., description="Typed command line")
    result: CommandResultInfo = Field(..., description="Command result")

    @classmethod
    def from_entity(cls, entry: HistoryEntry):
        return cls(
            prompt=entry.prompt,
            input=entry.input,
            result=CommandResultInfo.from_entity(entry.result),
        )


class SessionState(BaseModel):
    """Schema for the visible state of a terminal session."""

    id: str = Field(..., description="Session identifier")
    prompt: str = Field(..., description="Current prompt path (e.g. '~/education')")
    cwd: str = Field(..., description="Current directory as printed by pwd")
    input: str = Field("", description="Content of the input line")
    suggestions: List[str] = Field(
        default_factory=list, description="Completion candidates on display"
    )
    entries: List[HistoryEntryInfo] = Field(
        default_factory=list, description="Displayed entries, oldest first"
    )

    @classmethod
    def from_entity(cls, session: Session):
        """Create a SessionState schema from a Session entity."""
        return cls(
            id=session.id,
            prompt=session.prompt,
            cwd=session.cwd,
            input=session.input_value,
            suggestions=list(session.suggestions),
            entries=[HistoryEntryInfo.from_entity(e) for e in session.entries],
        )


class CommandRequest(BaseModel):
    """Schema for submitting a command line."""

    input: str = Field(..., description="Command line to execute")


class CommandResponse(BaseModel):
    """Schema for the outcome of a submitted command."""

    entry: HistoryEntryInfo = Field(..., description="Executed entry")
    state: SessionState = Field(..., description="Session state afterwards")


class KeyRequest(BaseModel):
    """Schema for a key press on the input line."""

    key: Literal["Enter", "ArrowUp", "ArrowDown", "Tab"] = Field(
        ..., description="Pressed key"
    )
    input: Optional[str] = Field(
        None, description="Current content of the input field"
    )


class SuggestionRequest(BaseModel):
    """Schema for picking a displayed completion suggestion."""

    suggestion: str = Field(..., description="Chosen command name")


class HealthResponse(BaseModel):
    status: str = Field("ok", description="Service status")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
