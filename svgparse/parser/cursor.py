"""Cursor: position-tracking character reader over an immutable text buffer.

Every grammar in the package (tags, markup, path data) is written as a set of
``consume_*`` helpers that advance a Cursor and report whether they matched.
``capture()`` turns such a helper into a slice of the underlying text.
"""

from __future__ import annotations

from typing import Callable

from svgparse.parser.error import ParseError

Consumer = Callable[["Cursor"], "bool | None"]


class Cursor:
    """Reads ``text`` one character at a time, tracking line and column.

    ``position`` lets a cursor over a fragment (e.g. the inside of a tag) report
    coordinates relative to the enclosing document.
    """

    def __init__(self, text: str, position: tuple[int, int] = (1, 1)) -> None:
        self.text = text
        self.offset = 0
        self.line, self.column = position

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, line={self.line}, column={self.column})"

    # ── Inspection ────────────────────────────────────────────────────────

    def peek(self) -> str | None:
        if self.offset < len(self.text):
            return self.text[self.offset]
        return None

    def peek_many(self, count: int) -> str:
        return self.text[self.offset:self.offset + count]

    def is_done(self) -> bool:
        return self.offset >= len(self.text)

    def position(self) -> tuple[int, int]:
        return (self.line, self.column)

    def error(self, message: str) -> ParseError:
        """Build a ParseError located at the current position."""
        return ParseError(message, self.line, self.column)

    # ── Movement ──────────────────────────────────────────────────────────

    def advance(self) -> str | None:
        """Consume one character and return it, or None at end of input."""
        char = self.peek()
        if char is None:
            return None
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.offset += 1
        return char

    def capture(self, consumer: Consumer) -> str | None:
        """Run ``consumer`` and return the trimmed text it consumed.

        Returns None when the consumer fails (the cursor is then rewound to where
        it started) or when the consumed text is blank.
        """
        state = (self.offset, self.line, self.column)
        if consumer(self) is False:
            self.offset, self.line, self.column = state
            return None
        content = self.text[state[0]:self.offset].strip()
        return content or None

    # ── Consumers ─────────────────────────────────────────────────────────

    def consume_if(self, check: Callable[[str], bool]) -> bool:
        char = self.peek()
        if char is not None and check(char):
            self.advance()
            return True
        return False

    def consume_while(self, check: Callable[[str], bool]) -> bool:
        consumed = False
        while self.consume_if(check):
            consumed = True
        return consumed

    def consume_char(self, target: str) -> bool:
        return self.consume_if(lambda c: c == target)

    def consume_any(self, targets: str) -> bool:
        return self.consume_while(lambda c: c in targets)

    def consume_until_char(self, target: str) -> bool:
        return self.consume_while(lambda c: c != target)

    def consume_until_any(self, targets: str) -> bool:
        return self.consume_while(lambda c: c not in targets)

    def consume_all(self) -> bool:
        return self.consume_while(lambda _: True)
