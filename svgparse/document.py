"""Document root and file helpers.

Reading only decodes text and hands it to the Tokenizer; I/O and decoding
failures propagate as OSError / UnicodeDecodeError, never as ParseError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from svgparse.config import settings
from svgparse.node.catalog import SVG_NAMESPACE
from svgparse.node.element import Element
from svgparse.parser.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class Document(Element):
    """An `svg` root element carrying the SVG namespace."""

    def __init__(self) -> None:
        super().__init__("svg", bareable=True)
        self.set("xmlns", SVG_NAMESPACE)


def read(content: str) -> Tokenizer:
    """Tokenize document text."""
    return Tokenizer(content)


def open(path: str | Path, encoding: str | None = None) -> Tokenizer:  # noqa: A001
    """Read a file and tokenize its content."""
    path = Path(path)
    content = path.read_text(encoding=encoding or settings.default_encoding)
    logger.info("Opened %s (%d chars)", path, len(content))
    return Tokenizer(content)


def write(target: TextIO, document: Element) -> None:
    """Write a document to a text stream."""
    target.write(str(document))


def save(path: str | Path, document: Element, encoding: str | None = None) -> None:
    """Write a document to a file."""
    path = Path(path)
    path.write_text(str(document), encoding=encoding or settings.default_encoding)
    logger.info("Saved %s", path)
