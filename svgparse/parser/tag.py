"""Tag parser: the text between a tag's '<' and '>'.

    parse_tag("foo a='1' b=\"2\"/")  ->  Tag("foo", TagKind.EMPTY, {"a": "1", "b": "2"})

Parsing is atomic: the first violation raises ParseError and no partial tag is
returned.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from svgparse.parser import grammar
from svgparse.parser.cursor import Cursor
from svgparse.parser.error import ParseError

Attributes = dict[str, str]


class TagKind(enum.Enum):
    """Structural role of a tag (https://www.w3.org/TR/REC-xml/#sec-starttags)."""

    START = "start"
    END = "end"
    EMPTY = "empty"


@dataclass
class Tag:
    name: str
    kind: TagKind
    attributes: Attributes = field(default_factory=dict)


def parse_tag(content: str, position: tuple[int, int] = (1, 1)) -> Tag:
    """Parse tag content; ``position`` is where ``content`` starts in its document."""
    return _TagParser(content, position).process()


class _TagParser:
    def __init__(self, content: str, position: tuple[int, int]) -> None:
        self.cursor = Cursor(content, position)

    def process(self) -> Tag:
        if self.cursor.consume_char("/"):
            return self._read_end_tag()
        return self._read_start_or_empty_tag()

    def _read_end_tag(self) -> Tag:
        name = self._read_name()
        grammar.consume_whitespace(self.cursor)
        if not self.cursor.is_done():
            raise self.cursor.error("found an end tag with excessive data")
        return Tag(name, TagKind.END)

    def _read_start_or_empty_tag(self) -> Tag:
        name = self._read_name()
        attributes = self._read_attributes()
        grammar.consume_whitespace(self.cursor)
        position = self.cursor.position()
        tail = self.cursor.capture(Cursor.consume_all)
        if tail is None:
            kind = TagKind.START
        elif tail == "/":
            kind = TagKind.EMPTY
        else:
            raise ParseError("found an unexpected ending of a tag", *position)
        return Tag(name, kind, attributes)

    def _read_name(self) -> str:
        name = self.cursor.capture(grammar.consume_name)
        if name is None:
            raise self.cursor.error("expected a name")
        return name

    def _read_attributes(self) -> Attributes:
        attributes: Attributes = {}
        while True:
            grammar.consume_whitespace(self.cursor)
            attribute = self._read_attribute()
            if attribute is None:
                break
            name, value = attribute
            attributes[name] = value
        return attributes

    def _read_attribute(self) -> tuple[str, str] | None:
        attribute = self.cursor.capture(grammar.consume_attribute)
        if attribute is None:
            return None
        name, _, value = attribute.partition("=")
        value = value.lstrip(grammar.WHITESPACE)
        # Strip the surrounding quotes, keep the content verbatim
        return name.rstrip(grammar.WHITESPACE), value[1:-1]
