"""Parse errors with line/column context."""

from __future__ import annotations


class ParseError(ValueError):
    """A grammar violation found while reading markup or path data.

    A coordinate of 0 means it is unknown, so the formatted message degrades to
    "message (line L)" or the bare message.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(message, line, column)
        self.message = message
        self.line = line
        self.column = column

    @property
    def position(self) -> tuple[int, int]:
        return (self.line, self.column)

    def __str__(self) -> str:
        if self.line > 0 and self.column > 0:
            return f"{self.message} (line {self.line}, column {self.column})"
        if self.line > 0:
            return f"{self.message} (line {self.line})"
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.message, self.line, self.column) == (other.message, other.line, other.column)

    def __hash__(self) -> int:
        return hash((self.message, self.line, self.column))
