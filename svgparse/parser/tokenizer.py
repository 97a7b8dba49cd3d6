"""Markup tokenizer: lazy, single-pass stream of structural events.

    for event in Tokenizer("<svg><path d='M0,0 L1,1'/></svg>"):
        ...

Failures never stop the stream: a malformed construct yields an ``Error`` event
and the cursor is moved past it, so iterating after an error always makes
progress and eventually ends.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from svgparse.parser import grammar
from svgparse.parser.cursor import Consumer, Cursor
from svgparse.parser.error import ParseError
from svgparse.parser.tag import Tag, parse_tag

logger = logging.getLogger(__name__)


@dataclass
class Text:
    content: str


@dataclass
class Comment:
    content: str


@dataclass
class Declaration:
    content: str


@dataclass
class Instruction:
    content: str


@dataclass
class Error:
    error: ParseError


Event = Union[Text, Tag, Comment, Declaration, Instruction, Error]


class Tokenizer(Iterator[Event]):
    """Iterates over the events of a markup document.

    Not restartable: build a new Tokenizer to scan the text again.
    """

    def __init__(self, content: str) -> None:
        self.cursor = Cursor(content)

    def __iter__(self) -> Tokenizer:
        return self

    def __next__(self) -> Event:
        text = self.cursor.capture(lambda cursor: cursor.consume_until_char("<"))
        if text is not None:
            return Text(text)
        if self.cursor.is_done():
            raise StopIteration
        return self._next_angle()

    def _next_angle(self) -> Event:
        head = self.cursor.peek_many(4)
        if head.startswith("<!--"):
            return self._read(grammar.consume_comment, Comment, "found a malformed comment")
        if head.startswith("<!"):
            return self._read(grammar.consume_declaration, Declaration, "found a malformed declaration")
        if head.startswith("<?"):
            return self._read(grammar.consume_instruction, Instruction, "found a malformed instruction")
        return self._read_tag()

    def _read(self, consumer: Consumer, event: type, message: str) -> Event:
        start = self.cursor.position()
        content = self.cursor.capture(consumer)
        if content is None:
            return self._fail(ParseError(message, *start))
        return event(content)

    def _read_tag(self) -> Event:
        line, column = self.cursor.position()
        content = self.cursor.capture(grammar.consume_tag)
        if content is None:
            return self._fail(ParseError("found a malformed tag", line, column))
        try:
            return parse_tag(content[1:-1], (line, column + 1))
        except ParseError as e:
            logger.debug("Malformed tag %r: %s", content, e)
            return Error(e)

    def _fail(self, error: ParseError) -> Error:
        """Skip the construct under the cursor through its closing '>'.

        The cursor sits on the construct's '<' (capture rewinds on failure), so
        consuming it first guarantees forward progress even when no '>' follows.
        """
        self.cursor.advance()
        self.cursor.consume_until_char(">")
        self.cursor.consume_char(">")
        logger.debug("Tokenizer error: %s", error)
        return Error(error)


def tokenize(content: str) -> list[Event]:
    """Collect all events of ``content``."""
    return list(Tokenizer(content))
