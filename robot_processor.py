"""
Main toy robot processor interface.
This is the primary entry point for feeding commands to the simulator.
"""
from typing import List, Dict, Any, Optional, Tuple
from core.interpreter import RobotInterpreter
from core.results import CommandResult
from utils.errors import RobotError


class RobotProcessor:
    """
    Main interface for robot command processing.
    Provides a simple API for the console shell and the GUI.
    """

    def __init__(self):
        self.interpreter = RobotInterpreter()
        self._line_counter = 0

    def command_input(self, command: str) -> CommandResult:
        """
        Execute a single command line.

        Args:
            command: Raw command text, any case

        Returns:
            A report result, or the unrecognized result for unknown verbs
        """
        self._line_counter += 1
        return self.interpreter.execute(command, self._line_counter)

    def command_text(self, command: str) -> Optional[str]:
        """Execute a command and return its report, or None if unrecognized."""
        return self.command_input(command).message

    def run_script(self, script_text: str) -> List[CommandResult]:
        """
        Execute a command script against the current robot.

        Diagnostics are keyed by script line number, so earlier diagnostics
        are cleared first. Single commands entered afterwards are numbered
        after the last script line.

        Args:
            script_text: One command per line; blank and '#' lines are skipped

        Returns:
            One result per executed line
        """
        self.interpreter.error_collector.clear()
        results = self.interpreter.process_script(script_text)
        self._line_counter = len(script_text.split('\n'))
        return results

    def report(self) -> str:
        """Current status line without counting as a command."""
        return self.interpreter.robot_state.report()

    # Error handling methods for front-end integration

    def get_errors_for_line(self, line_number: int) -> List[RobotError]:
        """Get all diagnostics for a specific line number."""
        return self.interpreter.get_errors_for_line(line_number)

    def get_all_errors(self) -> List[RobotError]:
        """Get all diagnostics since the last reset."""
        return self.interpreter.get_all_errors()

    def has_errors(self) -> bool:
        """Check if there are any errors (excluding warnings)."""
        return self.interpreter.error_collector.has_errors()

    # State methods for visualization

    def is_placed(self) -> bool:
        return self.interpreter.robot_state.placed

    def get_robot_state(self) -> Dict[str, Any]:
        """Get current robot state summary."""
        return self.interpreter.robot_state.get_state_summary()

    def get_trail(self) -> List[Tuple[int, int]]:
        """Get visited cells as (x, y) tuples in order."""
        return [cell.to_tuple() for cell in self.interpreter.get_trail()]

    def get_statistics(self) -> Dict[str, Any]:
        return self.interpreter.get_statistics()

    def get_history(self) -> List[Tuple[str, CommandResult]]:
        return self.interpreter.get_history()

    def reset(self):
        """Reset processor to an unplaced robot."""
        self.interpreter.reset()
        self._line_counter = 0
