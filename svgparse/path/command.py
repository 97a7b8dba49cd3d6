"""Path-data commands (https://www.w3.org/TR/SVG/paths.html#PathData)."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from svgparse.utils.numbers import format_number

Number = float
ParameterLike = Union[int, float, Iterable["ParameterLike"]]


class Positioning(enum.Enum):
    """Whether parameters are absolute coordinates or offsets from the current point."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class CommandKind(enum.Enum):
    MOVE = "move"
    LINE = "line"
    HORIZONTAL_LINE = "horizontal_line"
    VERTICAL_LINE = "vertical_line"
    CUBIC_CURVE = "cubic_curve"
    SMOOTH_CUBIC_CURVE = "smooth_cubic_curve"
    QUADRATIC_CURVE = "quadratic_curve"
    SMOOTH_QUADRATIC_CURVE = "smooth_quadratic_curve"
    ELLIPTICAL_ARC = "elliptical_arc"
    CLOSE = "close"


# Absolute letters; relative commands use the lowercase form
LETTERS: dict[CommandKind, str] = {
    CommandKind.MOVE: "M",
    CommandKind.LINE: "L",
    CommandKind.HORIZONTAL_LINE: "H",
    CommandKind.VERTICAL_LINE: "V",
    CommandKind.CUBIC_CURVE: "C",
    CommandKind.SMOOTH_CUBIC_CURVE: "S",
    CommandKind.QUADRATIC_CURVE: "Q",
    CommandKind.SMOOTH_QUADRATIC_CURVE: "T",
    CommandKind.ELLIPTICAL_ARC: "A",
    CommandKind.CLOSE: "Z",
}

KINDS: dict[str, CommandKind] = {letter: kind for kind, letter in LETTERS.items()}


def to_parameters(value: ParameterLike) -> tuple[Number, ...]:
    """Flatten a number or a (nested) sequence of numbers into parameters.

    to_parameters(3) -> (3.0,); to_parameters(((1, 2), 3)) -> (1.0, 2.0, 3.0)
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not path parameters")
    if isinstance(value, (int, float)):
        return (float(value),)
    if isinstance(value, str):
        raise TypeError(f"expected numbers, got string {value!r}")
    parameters: list[Number] = []
    for item in value:
        parameters.extend(to_parameters(item))
    return tuple(parameters)


@dataclass(frozen=True)
class Command:
    """One path-data instruction.

    ``positioning`` is required for every kind except CLOSE, which has neither
    positioning nor parameters. Parameter counts are not validated.
    """

    kind: CommandKind
    positioning: Positioning | None = None
    parameters: tuple[Number, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", to_parameters(self.parameters))
        if self.kind is CommandKind.CLOSE:
            if self.positioning is not None or self.parameters:
                raise ValueError("a close command takes no positioning or parameters")
        elif self.positioning is None:
            raise ValueError(f"a {self.kind.value} command requires a positioning")

    @property
    def letter(self) -> str:
        if self.kind is CommandKind.CLOSE:
            return "z"
        letter = LETTERS[self.kind]
        return letter if self.positioning is Positioning.ABSOLUTE else letter.lower()

    def __str__(self) -> str:
        return self.letter + ",".join(format_number(p) for p in self.parameters)
