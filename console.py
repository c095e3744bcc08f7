"""
Console entry point for the toy robot simulator.
Reads commands from standard input and prints the robot's reports.
"""
import argparse
import sys
from typing import Optional, TextIO
from config.shell_config import ConfigManager, ShellConfig
from robot_processor import RobotProcessor


def print_diagnostics(processor: RobotProcessor, line_number: int, stream: TextIO):
    """Print diagnostics recorded for a line."""
    for error in processor.get_errors_for_line(line_number):
        label = "Warning" if error.severity.value == 'warning' else "Error"
        print(f"{label}: {error.message}", file=stream)


def run_shell(processor: RobotProcessor, config: ShellConfig,
              stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
              stderr: Optional[TextIO] = None):
    """Interactive loop. Ends on the exit command or end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if config.report_on_start:
        print(processor.report(), file=stdout)
    print(config.prompt, file=stdout)

    for line in stdin:
        line = line.rstrip('\r\n')
        if config.is_exit(line):
            break
        if not line.strip():
            continue

        result = processor.command_input(line)
        if not result.is_unrecognized:
            print(result.message, file=stdout)
        if config.verbose:
            print_diagnostics(processor, result.line_number, stderr)


def run_script_file(processor: RobotProcessor, config: ShellConfig, path: str,
                    stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
    """Run a command script file and print each report."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    with open(path, 'r', encoding='utf-8') as f:
        script_text = f.read()

    for result in processor.run_script(script_text):
        if not result.is_unrecognized:
            print(result.message, file=stdout)
        if config.verbose:
            print_diagnostics(processor, result.line_number, stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toy robot simulator on a 6x6 grid.")
    parser.add_argument("--script", help="run commands from a script file and exit")
    parser.add_argument("--config", help="load shell settings from a JSON file")
    parser.add_argument("--verbose", action="store_true",
                        help="print diagnostics for rejected commands")
    return parser


def main(argv: Optional[list] = None) -> int:
    """Runs the console shell."""
    args = build_parser().parse_args(argv)

    if args.config:
        config = ConfigManager.load_config(args.config)
    else:
        config = ConfigManager.console()
    if args.verbose:
        config.verbose = True

    processor = RobotProcessor()

    if args.script:
        try:
            run_script_file(processor, config, args.script)
        except OSError as e:
            print(f"Error: cannot read script {args.script}: {e}", file=sys.stderr)
            return 1
        return 0

    run_shell(processor, config)
    return 0


if __name__ == '__main__':
    sys.exit(main())
