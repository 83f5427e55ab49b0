"""Text command parser for human pilots.

Turns input like "ne", "north east" or "coast" into a Direction.
"""

import re
from enum import Enum

from ..models.direction import Direction


class ErrorType(Enum):
    """Classification of command input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class SpecialCommand(Enum):
    """Commands that don't move a ship."""
    HELP = "help"
    STATUS = "status"
    MAP = "map"
    QUIT = "quit"


SPECIAL_ALIASES = {
    "help": SpecialCommand.HELP,
    "h": SpecialCommand.HELP,
    "?": SpecialCommand.HELP,
    "status": SpecialCommand.STATUS,
    "st": SpecialCommand.STATUS,
    "map": SpecialCommand.MAP,
    "m": SpecialCommand.MAP,
    "quit": SpecialCommand.QUIT,
    "exit": SpecialCommand.QUIT,
    "q": SpecialCommand.QUIT,
}

DIRECTION_ALIASES = {
    "ne": Direction.NORTH_EAST,
    "northeast": Direction.NORTH_EAST,
    "nw": Direction.NORTH_WEST,
    "northwest": Direction.NORTH_WEST,
    "e": Direction.EAST,
    "east": Direction.EAST,
    "w": Direction.WEST,
    "west": Direction.WEST,
    "se": Direction.SOUTH_EAST,
    "southeast": Direction.SOUTH_EAST,
    "sw": Direction.SOUTH_WEST,
    "southwest": Direction.SOUTH_WEST,
    "coast": Direction.NO_ACCELERATION,
    "wait": Direction.NO_ACCELERATION,
    "drift": Direction.NO_ACCELERATION,
    "none": Direction.NO_ACCELERATION,
    "0": Direction.NO_ACCELERATION,
}


class CommandParser:
    """Parse pilot commands into directions or special commands."""

    def parse(self, command: str) -> Direction | SpecialCommand:
        """Parse a command string.

        Supported formats:
        - "<direction>" e.g. "ne", "north east", "North-East", "south_west"
        - "burn <direction>" / "go <direction>"
        - "coast", "wait", "drift" (no acceleration)
        - "help", "status", "map", "quit"

        Args:
            command: Command string to parse

        Returns:
            Direction to fly, or a SpecialCommand

        Raises:
            CommandParseError: If the command is not recognized
        """
        cmd = command.strip().lower()
        if not cmd:
            raise CommandParseError(ErrorType.SYNTAX_ERROR, "Empty command")

        if cmd in SPECIAL_ALIASES:
            return SPECIAL_ALIASES[cmd]

        words = cmd.split()
        verb = words[0]
        if verb in ("burn", "go", "thrust"):
            if len(words) == 1:
                raise CommandParseError(
                    ErrorType.SYNTAX_ERROR,
                    f"Syntax error: '{verb}' needs a direction\nExample: {verb} ne",
                )
            cmd = " ".join(words[1:])

        # "north east", "north-east" and "north_east" all collapse to "northeast"
        key = re.sub(r"[\s_-]+", "", cmd)
        if key in DIRECTION_ALIASES:
            return DIRECTION_ALIASES[key]

        raise CommandParseError(ErrorType.UNKNOWN_COMMAND, f"Unknown command: '{command.strip()}'")
