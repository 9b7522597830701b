"""Bounded event log of notable coordinator actions."""

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Protocol

from ..config import MAX_LOG_ENTRIES, RECENT_LOG_LIMIT
from ..logging_config import get_logger
from ..models import LogEntry, LogType

logger = get_logger(__name__)

_LEVELS = {
    LogType.INFO: logging.INFO,
    LogType.SUCCESS: logging.INFO,
    LogType.WARN: logging.WARNING,
    LogType.ERROR: logging.ERROR,
}


class IEventLog(Protocol):
    """Append-only record of actions, for observability."""

    def append(
        self, type: LogType | str, message: str, job_id: str | None = None
    ) -> LogEntry:
        """Record an entry and mirror it to the diagnostic output."""
        ...

    def recent(self, n: int = RECENT_LOG_LIMIT) -> list[LogEntry]:
        """Get the last n entries, oldest first."""
        ...

    def clear(self) -> None:
        """Drop all entries."""
        ...


class EventLog:
    """Ring buffer of LogEntries; the oldest entry is evicted past capacity."""

    def __init__(self, capacity: int = MAX_LOG_ENTRIES):
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._entries)

    def append(
        self, type: LogType | str, message: str, job_id: str | None = None
    ) -> LogEntry:
        """Record an entry and mirror it to the diagnostic output.

        An unknown type tag is recorded as info.
        """
        try:
            entry_type = LogType(type)
        except ValueError:
            entry_type = LogType.INFO
        entry = LogEntry(
            time=datetime.now(timezone.utc),
            type=entry_type,
            message=message,
            job_id=job_id,
        )
        self._entries.append(entry)
        logger.log(
            _LEVELS[entry_type],
            "[%s] %s",
            entry_type.value.upper(),
            message,
            extra={"job_id": job_id},
        )
        return entry

    def recent(self, n: int = RECENT_LOG_LIMIT) -> list[LogEntry]:
        """Get the last n entries, oldest first."""
        if n <= 0:
            return []
        return list(self._entries)[-n:]

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()
