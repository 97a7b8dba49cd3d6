"""Path-data parser: the `d` attribute mini-language.

The whole string is parsed atomically: the first grammar violation raises a
single ParseError and nothing is returned.
"""

from __future__ import annotations

import logging
import string

from svgparse.parser import grammar
from svgparse.parser.cursor import Cursor
from svgparse.path.command import KINDS, Command, CommandKind, Number, Positioning

logger = logging.getLogger(__name__)

# Positions 4 and 5 (1-based) of every 7-parameter arc group are flags
_ARC_GROUP = 7
_ARC_FLAGS = (4, 5)


def parse_commands(content: str) -> list[Command]:
    """Parse path data into its commands, in source order."""
    commands = _PathParser(content).process()
    logger.debug("Parsed path data: %d commands", len(commands))
    return commands


class _PathParser:
    def __init__(self, content: str) -> None:
        self.cursor = Cursor(content)

    def process(self) -> list[Command]:
        commands: list[Command] = []
        while True:
            grammar.consume_whitespace(self.cursor)
            command = self._read_command()
            if command is None:
                break
            commands.append(command)
        return commands

    def _read_command(self) -> Command | None:
        letter = self.cursor.peek()
        if letter is None:
            return None
        if letter not in string.ascii_letters:
            raise self.cursor.error("expected a path command")
        kind = KINDS.get(letter.upper())
        if kind is None:
            raise self.cursor.error(f"found an unknown path command '{letter}'")
        self.cursor.advance()
        if kind is CommandKind.CLOSE:
            return Command(kind)
        positioning = Positioning.ABSOLUTE if letter.isupper() else Positioning.RELATIVE
        grammar.consume_whitespace(self.cursor)
        if kind is CommandKind.ELLIPTICAL_ARC:
            parameters = self._read_arc_parameters()
        else:
            parameters = self._read_parameters()
        return Command(kind, positioning, tuple(parameters))

    def _read_parameters(self) -> list[Number]:
        parameters: list[Number] = []
        while (number := grammar.read_number(self.cursor)) is not None:
            parameters.append(number)
            self._skip_separator()
        return parameters

    def _read_arc_parameters(self) -> list[Number]:
        """Read arc groups, allowing flags without delimiters: "a1 1 0 00.5-2"."""
        parameters: list[Number] = []
        index = 1
        while True:
            if index % _ARC_GROUP in _ARC_FLAGS:
                value = grammar.read_flag(self.cursor)
            else:
                value = grammar.read_number(self.cursor)
                if value is None:
                    break
            parameters.append(value)
            index += 1
            self._skip_separator()
        return parameters

    def _skip_separator(self) -> None:
        grammar.consume_whitespace(self.cursor)
        self.cursor.consume_char(",")
