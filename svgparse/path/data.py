"""Path data: an ordered command sequence with a fluent builder.

    data = Data().move_to((10, 10)).line_by((0, 50)).close()
    str(data)            # "M10,10 l0,50 z"
    Data.parse(str(data)) == data
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from svgparse.path.command import Command, CommandKind, ParameterLike, Positioning
from svgparse.path.parser import parse_commands


class Data(Sequence[Command]):
    """A `d` attribute value (https://www.w3.org/TR/SVG/paths.html#PathData)."""

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._commands: list[Command] = list(commands)

    @classmethod
    def parse(cls, content: str) -> Data:
        """Parse path data; raises ParseError on the first violation."""
        return cls(parse_commands(content))

    def serialize(self) -> str:
        return " ".join(str(command) for command in self._commands)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Data({self.serialize()!r})"

    def __getitem__(self, index):
        return self._commands[index]

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        return self._commands == other._commands

    __hash__ = None  # type: ignore[assignment]

    # ── Builder ───────────────────────────────────────────────────────────

    def add(self, command: Command) -> Data:
        self._commands.append(command)
        return self

    def _push(self, kind: CommandKind, positioning: Positioning, parameters: ParameterLike) -> Data:
        return self.add(Command(kind, positioning, parameters))

    def move_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.MOVE, Positioning.ABSOLUTE, parameters)

    def move_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.MOVE, Positioning.RELATIVE, parameters)

    def line_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.LINE, Positioning.ABSOLUTE, parameters)

    def line_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.LINE, Positioning.RELATIVE, parameters)

    def horizontal_line_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.HORIZONTAL_LINE, Positioning.ABSOLUTE, parameters)

    def horizontal_line_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.HORIZONTAL_LINE, Positioning.RELATIVE, parameters)

    def vertical_line_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.VERTICAL_LINE, Positioning.ABSOLUTE, parameters)

    def vertical_line_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.VERTICAL_LINE, Positioning.RELATIVE, parameters)

    def cubic_curve_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.CUBIC_CURVE, Positioning.ABSOLUTE, parameters)

    def cubic_curve_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.CUBIC_CURVE, Positioning.RELATIVE, parameters)

    def smooth_cubic_curve_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.SMOOTH_CUBIC_CURVE, Positioning.ABSOLUTE, parameters)

    def smooth_cubic_curve_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.SMOOTH_CUBIC_CURVE, Positioning.RELATIVE, parameters)

    def quadratic_curve_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.QUADRATIC_CURVE, Positioning.ABSOLUTE, parameters)

    def quadratic_curve_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.QUADRATIC_CURVE, Positioning.RELATIVE, parameters)

    def smooth_quadratic_curve_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.SMOOTH_QUADRATIC_CURVE, Positioning.ABSOLUTE, parameters)

    def smooth_quadratic_curve_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.SMOOTH_QUADRATIC_CURVE, Positioning.RELATIVE, parameters)

    def elliptical_arc_to(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.ELLIPTICAL_ARC, Positioning.ABSOLUTE, parameters)

    def elliptical_arc_by(self, parameters: ParameterLike) -> Data:
        return self._push(CommandKind.ELLIPTICAL_ARC, Positioning.RELATIVE, parameters)

    def close(self) -> Data:
        return self.add(Command(CommandKind.CLOSE))
