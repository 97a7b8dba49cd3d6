"""Path-data parsing and serialization."""

from svgparse.path.command import Command, CommandKind, Positioning, to_parameters
from svgparse.path.data import Data
from svgparse.path.parser import parse_commands

__all__ = [
    "Command",
    "CommandKind",
    "Positioning",
    "to_parameters",
    "Data",
    "parse_commands",
]
