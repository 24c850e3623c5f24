"""
Reports models — status report requirements and recent log messages.
"""

from enum import IntEnum
from typing import Optional
from pydantic import BaseModel


class Severity(IntEnum):
    """Status report requirement severity."""
    INFO = -1
    OK = 0
    WARNING = 1
    ERROR = 2


class LogSeverity(IntEnum):
    """Log message severity (RFC 5424 levels)."""
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class Requirement(BaseModel):
    title: str
    value: str
    severity: Optional[int] = None
    description: Optional[str] = None

    model_config = {"extra": "forbid"}

    @property
    def level(self) -> Optional[Severity]:
        if self.severity is None:
            return None
        try:
            return Severity(self.severity)
        except ValueError:
            return None


class StatusReport(BaseModel):
    requirements: list[Requirement]

    model_config = {"extra": "forbid"}

    def with_level(self, level: Severity) -> list[Requirement]:
        return [r for r in self.requirements if r.level == level]

    @property
    def errors(self) -> list[Requirement]:
        return self.with_level(Severity.ERROR)

    @property
    def warnings(self) -> list[Requirement]:
        return self.with_level(Severity.WARNING)


class LogEntry(BaseModel):
    wid: int
    type: str
    message: str
    severity: int
    timestamp: int
    username: Optional[str] = None
    location: Optional[str] = None

    model_config = {"extra": "forbid"}

    @property
    def level(self) -> Optional[LogSeverity]:
        try:
            return LogSeverity(self.severity)
        except ValueError:
            return None
