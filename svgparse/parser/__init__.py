"""Markup parsing: cursor, grammar primitives, tag parser and tokenizer."""

from svgparse.parser.cursor import Cursor
from svgparse.parser.error import ParseError
from svgparse.parser.tag import Tag, TagKind, parse_tag
from svgparse.parser.tokenizer import (
    Comment,
    Declaration,
    Error,
    Event,
    Instruction,
    Text,
    Tokenizer,
    tokenize,
)

__all__ = [
    "Cursor",
    "ParseError",
    # Tags
    "Tag",
    "TagKind",
    "parse_tag",
    # Events
    "Event",
    "Text",
    "Comment",
    "Declaration",
    "Instruction",
    "Error",
    "Tokenizer",
    "tokenize",
]
