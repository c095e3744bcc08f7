"""
Main robot interpreter that coordinates parsing, state transitions and reports.
"""
from collections import deque
from typing import List, Dict, Any, Deque, Tuple
from core.commands import CommandParser, Command, CommandType
from core.results import CommandResult
from core.robot_state import RobotState, Position
from utils.errors import ErrorCollector, ErrorSeverity, ErrorType


class RobotInterpreter:
    """Processes command lines against a single robot on the grid."""

    # Script lines starting with this are skipped
    COMMENT_PREFIX = "#"

    # Executed commands kept for display; older entries are dropped
    HISTORY_LIMIT = 1000

    def __init__(self, history_limit: int = HISTORY_LIMIT):
        # Core components
        self.error_collector = ErrorCollector()
        self.robot_state = RobotState()
        self.parser = CommandParser(self.error_collector)

        # Command handler mapping for placed robots
        self.handlers = {
            CommandType.MOVE: self.handle_move,
            CommandType.LEFT: self.handle_left,
            CommandType.RIGHT: self.handle_right,
            CommandType.REPORT: self.handle_report,
        }

        # State tracking
        self.history: Deque[Tuple[str, CommandResult]] = deque(maxlen=history_limit)
        self.command_count = 0
        self.unrecognized_count = 0

    def execute(self, line: str, line_number: int = 0) -> CommandResult:
        """
        Execute one command line and return its result.

        PLACE is always attempted. Any other command is gated until the robot
        has been placed, and only then checked against the known verbs.
        """
        command = self.parser.parse(line, line_number)
        self.command_count += 1
        result = self._dispatch(command)
        self.history.append((command.text, result))
        return result

    def _dispatch(self, command: Command) -> CommandResult:
        line_number = command.line_number

        if command.type == CommandType.PLACE:
            return self.handle_place(command)

        if not self.robot_state.placed:
            self.error_collector.add_warning(
                line_number, f"Ignored '{command.text}': no robot placed"
            )
            return self.handle_report(command)

        handler = self.handlers.get(command.type)
        if handler is None:
            self.unrecognized_count += 1
            self.error_collector.add_error(
                line_number, 0, len(command.text),
                f"Unrecognized command: '{command.text}'",
                ErrorType.SYNTAX
            )
            return CommandResult.unrecognized(line_number)

        return handler(command)

    def process_script(self, script_text: str) -> List[CommandResult]:
        """Execute a multi-line command script, skipping blanks and comments."""
        results = []
        for line_number, line in enumerate(script_text.split('\n'), 1):
            line = line.strip()
            if not line or line.startswith(self.COMMENT_PREFIX):
                continue
            results.append(self.execute(line, line_number))
        return results

    def handle_place(self, command: Command) -> CommandResult:
        """
        PLACE X,Y,F - Put the robot on the grid.

        The target cell must be on the grid. A first placement also needs a
        valid facing; once placed, a PLACE without one keeps the current facing.
        """
        state = self.robot_state

        if not command.position.is_on_grid():
            self.error_collector.add_error(
                command.line_number, 0, len(command.text),
                f"PLACE target {command.position.to_tuple()} is off the grid",
                ErrorType.SEMANTIC
            )
            return self.handle_report(command)

        if command.facing is None and not state.placed:
            self.error_collector.add_error(
                command.line_number, 0, len(command.text),
                "First PLACE requires a facing of NORTH, EAST, SOUTH or WEST",
                ErrorType.SEMANTIC
            )
            return self.handle_report(command)

        state.place(command.position, command.facing)
        return self.handle_report(command)

    def handle_move(self, command: Command) -> CommandResult:
        """MOVE - Step one cell forward, ignored at the grid edge."""
        state = self.robot_state
        target = state.position.step(state.facing)

        if target.is_on_grid():
            state.update_position(target)
        else:
            self.error_collector.add_warning(
                command.line_number,
                f"MOVE to {target.to_tuple()} discarded at grid edge"
            )

        return self.handle_report(command)

    def handle_left(self, command: Command) -> CommandResult:
        """LEFT - Rotate 90 degrees counter-clockwise."""
        self.robot_state.rotate(-1)
        return self.handle_report(command)

    def handle_right(self, command: Command) -> CommandResult:
        """RIGHT - Rotate 90 degrees clockwise."""
        self.robot_state.rotate(1)
        return self.handle_report(command)

    def handle_report(self, command: Command) -> CommandResult:
        return CommandResult.report(self.robot_state.report(), command.line_number)

    # Public interface methods for front-end integration

    def get_errors_for_line(self, line_number: int):
        """Get all diagnostics for a specific line number."""
        return self.error_collector.get_errors_for_line(line_number)

    def get_all_errors(self):
        """Get all diagnostics recorded so far."""
        return self.error_collector.get_all_errors()

    def get_trail(self) -> List[Position]:
        return list(self.robot_state.trail)

    def get_history(self) -> List[Tuple[str, CommandResult]]:
        """Get the most recent (command text, result) pairs, oldest first."""
        return list(self.history)

    def get_statistics(self) -> Dict[str, Any]:
        """Get processing and robot statistics."""
        return {
            'processing': {
                'total_commands': self.command_count,
                'unrecognized': self.unrecognized_count,
                'errors': len([e for e in self.error_collector.errors
                               if e.severity == ErrorSeverity.ERROR]),
                'warnings': len(self.error_collector.get_warnings()),
            },
            'robot_state': self.robot_state.get_state_summary()
        }

    def reset(self):
        """Reset interpreter to an unplaced robot."""
        self.error_collector.clear()
        self.robot_state = RobotState()
        self.history.clear()
        self.command_count = 0
        self.unrecognized_count = 0
