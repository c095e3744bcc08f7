import pytest

from core.commands import CommandParser, CommandType
from core.robot_state import Direction
from utils.errors import ErrorCollector, ErrorType


@pytest.fixture
def collector():
    return ErrorCollector()


@pytest.fixture
def parser(collector):
    return CommandParser(collector)


@pytest.mark.parametrize("line, expected", [
    ("MOVE", CommandType.MOVE),
    ("move", CommandType.MOVE),
    ("Left", CommandType.LEFT),
    ("rIgHt", CommandType.RIGHT),
    ("report", CommandType.REPORT),
    ("JUMP", CommandType.UNRECOGNIZED),
    ("MOVE ", CommandType.UNRECOGNIZED),
    ("", CommandType.UNRECOGNIZED),
])
def test_verbs_match_exactly(parser, line, expected):
    assert parser.parse(line).type == expected


def test_place_is_case_insensitive(parser):
    command = parser.parse("place 1,2,north")
    assert command.type == CommandType.PLACE
    assert command.position.to_tuple() == (1, 2)
    assert command.facing == Direction.NORTH


def test_place_is_matched_by_prefix(parser):
    command = parser.parse("PLACEMENT 1,2,EAST")
    assert command.type == CommandType.PLACE
    assert command.position.to_tuple() == (1, 2)
    assert command.facing == Direction.EAST


def test_place_fields_tolerate_whitespace_and_sign(parser):
    command = parser.parse("PLACE  3 , +4 ,WEST")
    assert command.position.to_tuple() == (3, 4)
    assert command.facing == Direction.WEST


def test_place_keeps_negative_coordinates_for_validation(parser):
    assert parser.parse("PLACE -1,2,WEST").position.to_tuple() == (-1, 2)


def test_place_without_direction(parser):
    command = parser.parse("PLACE 1,2")
    assert command.position.to_tuple() == (1, 2)
    assert command.facing is None


def test_direction_is_not_trimmed(parser):
    assert parser.parse("PLACE 1,2, NORTH").facing is None


@pytest.mark.parametrize("line", [
    "PLACE",
    "PLACE 1",
    "PLACE ,2,NORTH",
    "PLACE  ,2,NORTH",
    "PLACE a,2,NORTH",
    "PLACE 1_0,2,NORTH",
    "PLACE1,2,NORTH",
    "PLACE,1 2,NORTH",
])
def test_bad_x_yields_sentinel_position(parser, collector, line):
    command = parser.parse(line)
    assert command.type == CommandType.PLACE
    assert command.position.to_tuple() == (-1, -1)
    assert collector.has_errors()
    assert all(e.error_type == ErrorType.SYNTAX for e in collector.errors)


def test_missing_y_keeps_x(parser, collector):
    command = parser.parse("PLACE 1,NORTH")
    assert command.position.to_tuple() == (1, -1)
    assert command.facing == Direction.NORTH
    assert "Invalid Y coordinate" in collector.errors[0].message


def test_extra_field_makes_y_invalid(parser):
    command = parser.parse("PLACE 1,2,3,NORTH")
    assert command.position.to_tuple() == (1, -1)
    assert command.facing == Direction.NORTH


def test_x_diagnostic_points_at_field(parser, collector):
    parser.parse("PLACE zz,2,NORTH", line_number=7)
    error = collector.errors[0]
    assert error.line_number == 7
    assert (error.char_start, error.char_end) == (6, 8)


def test_valid_commands_record_no_diagnostics(parser, collector):
    for line in ["PLACE 0,0,NORTH", "MOVE", "LEFT", "RIGHT", "REPORT", "PLACE 4,4"]:
        parser.parse(line)
    assert collector.errors == []


def test_command_str(parser):
    assert str(parser.parse("place 2,3,south")) == "PLACE 2,3,SOUTH"
    assert str(parser.parse("place 2,3")) == "PLACE 2,3,?"
    assert str(parser.parse("left")) == "LEFT"


def test_huge_x_field_yields_sentinel_position(parser, collector):
    command = parser.parse("PLACE " + "9" * 5000 + ",1,NORTH")
    assert command.position.to_tuple() == (-1, -1)
    assert "Invalid X coordinate" in collector.errors[0].message


def test_huge_y_field_keeps_x(parser):
    command = parser.parse("PLACE 1," + "1" * 5000 + ",EAST")
    assert command.position.to_tuple() == (1, -1)
    assert command.facing == Direction.EAST
