"""svgparse: SVG markup tokenizer and path-data parser.

Example:
    >>> from svgparse import Data, Tag, read
    >>> for event in read("<svg><path d='M0,0 L10,10'/></svg>"):
    ...     if isinstance(event, Tag) and event.name == "path":
    ...         print(Data.parse(event.attributes["d"]))
    M0,0 L10,10

Text, Comment and Blob nodes for composing documents live in svgparse.node.
"""

from svgparse.document import Document, open, read, save, write
from svgparse.node import Element, create
from svgparse.parser import (
    Comment,
    Cursor,
    Declaration,
    Error,
    Event,
    Instruction,
    ParseError,
    Tag,
    TagKind,
    Text,
    Tokenizer,
    parse_tag,
    tokenize,
)
from svgparse.path import Command, CommandKind, Data, Positioning

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "Cursor",
    "Event",
    "Text",
    "Comment",
    "Declaration",
    "Instruction",
    "Error",
    "ParseError",
    "Tag",
    "TagKind",
    "Tokenizer",
    "parse_tag",
    "tokenize",
    # Path data
    "Command",
    "CommandKind",
    "Data",
    "Positioning",
    # Composition
    "Document",
    "Element",
    "create",
    # I/O
    "open",
    "read",
    "save",
    "write",
    # Metadata
    "__version__",
]
