"""Leaf nodes: text, comments and raw blobs."""

from __future__ import annotations


def escape(text: str) -> str:
    """Escape character data for display."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class Node:
    """Anything that can be appended to an element."""

    # Bare nodes are written inline, without surrounding newlines
    bare = False

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]


class Text(Node):
    bare = True

    def __init__(self, content: str) -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"Text({self.content!r})"

    def __str__(self) -> str:
        return escape(self.content)


class Comment(Node):
    def __init__(self, content: str) -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"Comment({self.content!r})"

    def __str__(self) -> str:
        return f"<!-- {self.content} -->"


class Blob(Node):
    """Markup written verbatim, e.g. a pre-rendered fragment."""

    def __init__(self, content: str) -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"Blob({self.content!r})"

    def __str__(self) -> str:
        return self.content
