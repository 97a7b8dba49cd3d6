"""Attribute value conversion."""

from __future__ import annotations

from typing import Any

from svgparse.path.data import Data
from svgparse.utils.numbers import format_number


def to_value(value: Any) -> str:
    """Convert a Python value to its attribute text.

    Strings pass through; numbers use the default decimal form; pairs and
    quadruples (points, view boxes) and lists are space-separated; path Data is
    serialized.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, Data):
        return value.serialize()
    if isinstance(value, tuple):
        if len(value) not in (2, 4):
            raise TypeError(f"expected a pair or a quadruple, got {len(value)} items")
        return " ".join(to_value(item) for item in value)
    if isinstance(value, list):
        return " ".join(to_value(item) for item in value)
    raise TypeError(f"cannot use {type(value).__name__} as an attribute value")
