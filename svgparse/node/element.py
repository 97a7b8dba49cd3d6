"""Generic element with a fluent set/add API."""

from __future__ import annotations

from typing import Any

from svgparse.node.text import Node, escape
from svgparse.node.value import to_value


def escape_attribute(value: str) -> str:
    """Escape an attribute value for a double-quoted display."""
    return escape(value).replace('"', "&quot;").replace("'", "&apos;")


class Element(Node):
    """An element node.

    Bareable elements (svg, script, style, text) put every child on its own
    line; other elements keep text children inline, so `<title>x</title>`.
    """

    def __init__(self, name: str, bareable: bool = False) -> None:
        self.name = name
        self.bareable = bareable
        self.attributes: dict[str, str] = {}
        self.children: list[Node] = []

    def __repr__(self) -> str:
        return f"Element({self.name!r}, attributes={self.attributes!r}, children={len(self.children)})"

    def set(self, name: str, value: Any) -> Element:
        """Assign an attribute and return the element."""
        self.attributes[name] = to_value(value)
        return self

    def add(self, node: Node) -> Element:
        """Append a child node and return the element."""
        if not isinstance(node, Node):
            raise TypeError(f"expected a node, got {type(node).__name__}")
        self.children.append(node)
        return self

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def render(self, inline_text: bool = True) -> str:
        parts = [f"<{self.name}"]
        for name in sorted(self.attributes):
            parts.append(f' {name}="{escape_attribute(self.attributes[name])}"')
        if not self.children:
            parts.append("/>")
            return "".join(parts)
        parts.append(">")
        bare = False
        for child in self.children:
            bare = child.bare and inline_text
            if not bare:
                parts.append("\n")
            parts.append(str(child))
        if not bare:
            parts.append("\n")
        parts.append(f"</{self.name}>")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render(inline_text=not self.bareable)
