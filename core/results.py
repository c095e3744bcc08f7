"""
Command results returned by the interpreter.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResultStatus(Enum):
    REPORT = "report"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class CommandResult:
    """Either a status report or the unrecognized-command signal."""
    status: ResultStatus
    message: Optional[str] = None
    line_number: int = 0

    @classmethod
    def report(cls, message: str, line_number: int = 0) -> 'CommandResult':
        return cls(ResultStatus.REPORT, message, line_number)

    @classmethod
    def unrecognized(cls, line_number: int = 0) -> 'CommandResult':
        return cls(ResultStatus.UNRECOGNIZED, None, line_number)

    @property
    def is_unrecognized(self) -> bool:
        return self.status == ResultStatus.UNRECOGNIZED

    def __str__(self):
        return self.message or ""
