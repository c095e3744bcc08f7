"""
Command parser for turning raw text lines into structured robot commands.
"""
import re
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional
from core.robot_state import Direction, Position
from utils.errors import ErrorCollector, ErrorType


class CommandType(Enum):
    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"
    UNRECOGNIZED = "UNRECOGNIZED"


@dataclass
class Command:
    """Represents a single parsed command line."""
    type: CommandType
    text: str
    line_number: int = 0

    # PLACE arguments; sentinel values when extraction failed
    position: Position = field(default_factory=Position)
    facing: Optional[Direction] = None

    def __str__(self):
        if self.type == CommandType.PLACE:
            facing = self.facing.name if self.facing else "?"
            return f"PLACE {self.position.x},{self.position.y},{facing}"
        return self.type.value


class CommandParser:
    """Parses command lines. Never raises on malformed input."""

    PLACE_PREFIX = "PLACE"

    VERB_TYPES = {
        "MOVE": CommandType.MOVE,
        "LEFT": CommandType.LEFT,
        "RIGHT": CommandType.RIGHT,
        "REPORT": CommandType.REPORT,
    }

    # Optional surrounding whitespace and a leading sign
    INTEGER_PATTERN = re.compile(r'\s*[+-]?[0-9]+\s*')

    def __init__(self, error_collector: ErrorCollector):
        self.error_collector = error_collector

    @staticmethod
    def normalize(line: str) -> str:
        return line.upper()

    def is_place(self, text: str) -> bool:
        """Check if a normalized line is a PLACE command."""
        return text.startswith(self.PLACE_PREFIX)

    def parse(self, line: str, line_number: int = 0) -> Command:
        """Parse a raw line into a command."""
        text = self.normalize(line)

        if self.is_place(text):
            return Command(
                CommandType.PLACE, text, line_number,
                position=self._extract_position(text, line_number),
                facing=self._extract_facing(text),
            )

        command_type = self.VERB_TYPES.get(text, CommandType.UNRECOGNIZED)
        return Command(command_type, text, line_number)

    def _extract_position(self, text: str, line_number: int) -> Position:
        """
        Extract the x,y pair of a PLACE command.

        The x-field runs from after the first space to the first comma. The
        y-field runs from the first comma to the last comma, or to the end of
        the line when there is only one comma. A failed x leaves (-1, -1); a
        failed y leaves y at -1 while keeping x.
        """
        position = Position()

        x_start = text.find(' ') + 1
        first_comma = text.find(',')

        if first_comma < 0 or first_comma < x_start:
            self.error_collector.add_error(
                line_number, 0, len(text),
                "PLACE expects arguments as X,Y,DIRECTION",
                ErrorType.SYNTAX
            )
            return position

        x_field = text[x_start:first_comma]
        x = self._parse_int(x_field)
        if x is None:
            self.error_collector.add_error(
                line_number, x_start, first_comma,
                f"Invalid X coordinate: '{x_field.strip()}'",
                ErrorType.SYNTAX
            )
            return position
        position.x = x

        last_comma = text.rfind(',')
        y_start = first_comma + 1
        y_end = last_comma if last_comma > first_comma else len(text)
        y_field = text[y_start:y_end]

        y = self._parse_int(y_field)
        if y is None:
            self.error_collector.add_error(
                line_number, y_start, y_end,
                f"Invalid Y coordinate: '{y_field.strip()}'",
                ErrorType.SYNTAX
            )
        else:
            position.y = y

        return position

    def _extract_facing(self, text: str) -> Optional[Direction]:
        """Match the text after the last comma against the four directions."""
        # Whether a missing facing is acceptable depends on placement state
        return Direction.from_token(text[text.rfind(',') + 1:])

    def _parse_int(self, value: str) -> Optional[int]:
        """Parse a base-10 integer field, None if it is not one."""
        if not self.INTEGER_PATTERN.fullmatch(value):
            return None
        try:
            return int(value)
        except ValueError:
            # Digit strings past the interpreter's conversion limit
            return None
