import io

from config.shell_config import ConfigManager
from console import main, run_shell
from robot_processor import RobotProcessor

PROMPT = "Please enter a command or hit 'x' to exit:"


def shell_output(text, config=None):
    stdout = io.StringIO()
    stderr = io.StringIO()
    run_shell(RobotProcessor(), config or ConfigManager.console(),
              stdin=io.StringIO(text), stdout=stdout, stderr=stderr)
    return stdout.getvalue().splitlines(), stderr.getvalue().splitlines()


def test_session_prints_reports_until_exit():
    lines, errors = shell_output("PLACE 1,2,EAST\nMOVE\nJUMP\n\nREPORT\nx\nREPORT\n")
    assert lines == [
        "No robot placed.",
        PROMPT,
        "Robot is at 1, 2, facing East",
        "Robot is at 2, 2, facing East",
        "Robot is at 2, 2, facing East",
    ]
    assert errors == []


def test_exit_command_is_case_insensitive():
    lines, _ = shell_output("X\nPLACE 0,0,NORTH\n")
    assert lines == ["No robot placed.", PROMPT]


def test_end_of_input_ends_session():
    lines, _ = shell_output("PLACE 0,0,NORTH")
    assert lines[-1] == "Robot is at 0, 0, facing North"


def test_verbose_prints_diagnostics():
    config = ConfigManager.verbose_console()
    _, errors = shell_output("MOVE\nPLACE 0,0,NORTH\nJUMP\n", config)
    assert errors == [
        "Warning: Ignored 'MOVE': no robot placed",
        "Error: Unrecognized command: 'JUMP'",
    ]


def test_custom_exit_command():
    config = ConfigManager.console()
    config.exit_command = "quit"
    config.report_on_start = False
    lines, _ = shell_output("x\nQUIT\nREPORT\n", config)
    assert lines == [PROMPT, "No robot placed."]


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "walk.txt"
    script.write_text("# walk\nPLACE 0,0,NORTH\nMOVE\nJUMP\nLEFT\n", encoding="utf-8")

    assert main(["--script", str(script)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Robot is at 0, 0, facing North",
        "Robot is at 0, 1, facing North",
        "Robot is at 0, 1, facing West",
    ]


def test_main_verbose_script_reports_script_lines(tmp_path, capsys):
    script = tmp_path / "walk.txt"
    script.write_text("PLACE 0,5,NORTH\nMOVE\n", encoding="utf-8")

    assert main(["--script", str(script), "--verbose"]) == 0

    err = capsys.readouterr().err
    assert "Warning: MOVE to (0, 6) discarded at grid edge" in err


def test_main_missing_script(tmp_path, capsys):
    assert main(["--script", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read script" in capsys.readouterr().err


def test_main_interactive_uses_config_file(tmp_path, capsys, monkeypatch):
    config = ConfigManager.console()
    config.report_on_start = False
    config.prompt = "robot>"
    path = tmp_path / "shell.json"
    ConfigManager.save_config(config, str(path))

    monkeypatch.setattr("sys.stdin", io.StringIO("PLACE 2,2,SOUTH\nx\n"))
    assert main(["--config", str(path)]) == 0

    assert capsys.readouterr().out.splitlines() == ["robot>", "Robot is at 2, 2, facing South"]
