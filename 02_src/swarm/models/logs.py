"""Event log data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class LogType(str, Enum):
    """Severity tag of an event log entry."""

    INFO = "info"
    SUCCESS = "success"
    WARN = "warn"
    ERROR = "error"


@dataclass
class LogEntry:
    """A single notable action recorded by the event log."""

    time: datetime
    type: LogType
    message: str
    job_id: str | None = None

    def to_dict(self) -> dict:
        return {
            "time": self.time.isoformat(),
            "type": self.type.value,
            "message": self.message,
            "job_id": self.job_id,
        }
