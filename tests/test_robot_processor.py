import pytest

from core.robot_state import NOT_PLACED_MESSAGE
from robot_processor import RobotProcessor


@pytest.fixture
def processor():
    return RobotProcessor()


def test_command_input_returns_reports(processor):
    assert processor.command_input("REPORT").message == NOT_PLACED_MESSAGE
    assert processor.command_input("place 0,0,north").message == "Robot is at 0, 0, facing North"


def test_command_text_uses_none_for_unrecognized(processor):
    processor.command_input("PLACE 0,0,NORTH")
    assert processor.command_text("JUMP") is None
    assert processor.command_text("MOVE") == "Robot is at 0, 1, facing North"


def test_line_numbers_count_commands(processor):
    processor.command_input("MOVE")
    result = processor.command_input("PLACE 9,9,NORTH")
    assert result.line_number == 2
    assert len(processor.get_errors_for_line(1)) == 1
    assert len(processor.get_errors_for_line(2)) == 1
    assert processor.has_errors()


def test_report_does_not_count_as_command(processor):
    processor.report()
    assert processor.get_statistics()['processing']['total_commands'] == 0
    assert processor.command_input("MOVE").line_number == 1


def test_history(processor):
    processor.command_input("place 1,2,east")
    processor.command_input("jump")
    history = processor.get_history()
    assert [text for text, _ in history] == ["PLACE 1,2,EAST", "JUMP"]
    assert history[1][1].is_unrecognized


def test_run_script(processor):
    results = processor.run_script("PLACE 0,0,NORTH\nMOVE\nRIGHT\nMOVE\nREPORT")
    assert [r.message for r in results][-1] == "Robot is at 1, 1, facing East"
    assert processor.get_trail() == [(0, 0), (0, 1), (1, 1)]
    assert [text for text, _ in processor.get_history()] == [
        "PLACE 0,0,NORTH", "MOVE", "RIGHT", "MOVE", "REPORT"]


def test_run_script_continues_from_current_robot(processor):
    processor.command_input("PLACE 2,2,WEST")
    results = processor.run_script("MOVE\nREPORT")
    assert results[-1].message == "Robot is at 1, 2, facing West"


def test_run_script_clears_previous_diagnostics(processor):
    processor.command_input("MOVE")
    processor.run_script("PLACE 0,0,NORTH\nJUMP")
    [error] = processor.get_all_errors()
    assert error.line_number == 2


def test_run_script_with_only_comments(processor):
    assert processor.run_script("# nothing\n\n") == []
    assert processor.get_history() == []


def test_robot_state_and_reset(processor):
    processor.command_input("PLACE 3,3,SOUTH")
    assert processor.is_placed()
    assert processor.get_robot_state()['facing'] == "South"

    processor.reset()
    assert not processor.is_placed()
    assert processor.get_history() == []
    assert processor.get_all_errors() == []
    assert processor.command_input("REPORT").line_number == 1


def test_commands_after_script_are_numbered_past_it(processor):
    processor.command_input("MOVE")
    processor.run_script("PLACE 0,0,NORTH\nPLACE 9,9,NORTH")
    result = processor.command_input("JUMP")

    assert result.line_number == 3
    [error] = processor.get_errors_for_line(2)
    assert "off the grid" in error.message
    [error] = processor.get_errors_for_line(3)
    assert "'JUMP'" in error.message


def test_history_is_bounded():
    processor = RobotProcessor()
    limit = processor.interpreter.history.maxlen
    processor.command_input("PLACE 0,0,NORTH")
    for _ in range(limit):
        processor.command_input("LEFT")

    history = processor.get_history()
    assert len(history) == limit
    assert history[0][0] == "LEFT"
    assert processor.get_statistics()['processing']['total_commands'] == limit + 1
