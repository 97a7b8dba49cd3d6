"""Element tree nodes for composing SVG documents."""

from svgparse.node.catalog import CATALOG, SVG_NAMESPACE, ElementSpec, UnknownTagError, create
from svgparse.node.element import Element, escape_attribute
from svgparse.node.text import Blob, Comment, Node, Text, escape
from svgparse.node.value import to_value

__all__ = [
    "Node",
    "Element",
    "Text",
    "Comment",
    "Blob",
    "escape",
    "escape_attribute",
    "to_value",
    # Catalog
    "CATALOG",
    "SVG_NAMESPACE",
    "ElementSpec",
    "UnknownTagError",
    "create",
]
