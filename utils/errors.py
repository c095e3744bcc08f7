"""
Diagnostic definitions for rejected robot commands.
Commands never raise; rejections are collected here for display.
"""
from enum import Enum
from dataclasses import dataclass
from typing import List


class ErrorType(Enum):
    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    RUNTIME = "runtime"


class ErrorSeverity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass
class RobotError:
    """Represents a rejected or ignored command with position information."""
    line_number: int
    char_start: int
    char_end: int
    message: str
    error_type: ErrorType
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __str__(self):
        return f"Line {self.line_number}: {self.message}"


class ErrorCollector:
    """Collects and manages diagnostics while commands are processed."""

    def __init__(self):
        self.errors: List[RobotError] = []

    def add_error(self, line_number: int, char_start: int, char_end: int,
                  message: str, error_type: ErrorType,
                  severity: ErrorSeverity = ErrorSeverity.ERROR):
        """Add a diagnostic to the collection."""
        error = RobotError(line_number, char_start, char_end, message,
                           error_type, severity)
        self.errors.append(error)

    def add_warning(self, line_number: int, message: str,
                    error_type: ErrorType = ErrorType.RUNTIME):
        """Add a warning that spans the whole line."""
        self.add_error(line_number, 0, 0, message, error_type,
                       ErrorSeverity.WARNING)

    def get_errors_for_line(self, line_number: int) -> List[RobotError]:
        """Get all diagnostics for a specific line."""
        return [error for error in self.errors if error.line_number == line_number]

    def get_warnings(self) -> List[RobotError]:
        return [error for error in self.errors
                if error.severity == ErrorSeverity.WARNING]

    def has_errors(self) -> bool:
        """Check if there are any errors (excluding warnings)."""
        return any(error.severity == ErrorSeverity.ERROR for error in self.errors)

    def clear(self):
        """Clear all diagnostics."""
        self.errors.clear()

    def get_all_errors(self) -> List[RobotError]:
        """Get all diagnostics sorted by line number."""
        return sorted(self.errors, key=lambda e: (e.line_number, e.char_start))
