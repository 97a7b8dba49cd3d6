"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from svgparse.parser import ParseError
from svgparse.path import Command, CommandKind, Positioning


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class ErrorModel(BaseModel):
    message: str
    line: int = 0
    column: int = 0
    formatted: str = ""

    @classmethod
    def from_error(cls, error: ParseError) -> ErrorModel:
        return cls(message=error.message, line=error.line, column=error.column, formatted=str(error))


class EventModel(BaseModel):
    type: Literal["text", "tag", "comment", "declaration", "instruction", "error"]
    name: str | None = None
    kind: Literal["start", "end", "empty"] | None = None
    attributes: dict[str, str] | None = None
    content: str | None = None
    error: ErrorModel | None = None


class EventsResponse(BaseModel):
    events: list[EventModel] = Field(default_factory=list)
    error_count: int = 0


class CommandModel(BaseModel):
    command: CommandKind
    positioning: Positioning | None = None
    parameters: list[float] = Field(default_factory=list)

    @classmethod
    def from_command(cls, command: Command) -> CommandModel:
        return cls(
            command=command.kind,
            positioning=command.positioning,
            parameters=list(command.parameters),
        )

    def to_command(self) -> Command:
        return Command(self.command, self.positioning, tuple(self.parameters))


class PathParseResponse(BaseModel):
    commands: list[CommandModel] = Field(default_factory=list)
    d: str = ""  # Canonical re-serialization


class PathSerializeResponse(BaseModel):
    d: str


class PathResult(BaseModel):
    index: int
    d: str
    commands: list[CommandModel] = Field(default_factory=list)
    error: ErrorModel | None = None


class PathsResponse(BaseModel):
    paths: list[PathResult] = Field(default_factory=list)
