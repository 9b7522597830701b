"""EventLog module."""

from .event_log import EventLog, IEventLog

__all__ = ["EventLog", "IEventLog"]
