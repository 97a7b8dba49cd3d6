"""Number formatting shared by path data and attribute values."""

from __future__ import annotations

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Default decimal form: shortest round-trip digits, never exponent notation.

    1.0 -> "1", 2.5 -> "2.5", 1e-05 -> "0.00001", 1e+16 -> "10000000000000000".
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
