"""Tests for EventLog."""

import logging
from datetime import datetime, timezone

from swarm.event_log import EventLog
from swarm.models import LogType


class TestEventLogAppend:
    """Tests for EventLog.append()."""

    def test_append_creates_entry(self, event_log):
        """Test that append() records type, message and job."""
        entry = event_log.append(LogType.SUCCESS, "Assigned", "job_1")

        assert entry.type == LogType.SUCCESS
        assert entry.message == "Assigned"
        assert entry.job_id == "job_1"
        assert event_log.recent() == [entry]

    def test_append_accepts_plain_strings(self, event_log):
        entry = event_log.append("warn", "careful")
        assert entry.type == LogType.WARN
        assert entry.job_id is None

    def test_append_unknown_type_is_info(self, event_log, caplog):
        with caplog.at_level(logging.INFO):
            entry = event_log.append("debug", "x")

        assert entry.type == LogType.INFO
        assert event_log.recent() == [entry]
        assert (logging.INFO, "[INFO] x") in [
            (r.levelno, r.getMessage()) for r in caplog.records
        ]

    def test_append_generates_timestamp(self, event_log):
        before = datetime.now(timezone.utc)
        entry = event_log.append(LogType.INFO, "x")
        after = datetime.now(timezone.utc)

        assert before <= entry.time <= after

    def test_append_mirrors_to_logging(self, event_log, caplog):
        """Test that entries are mirrored to the diagnostic logger."""
        with caplog.at_level(logging.INFO):
            event_log.append(LogType.WARN, "No available agent", "job_1")
            event_log.append(LogType.ERROR, "boom")

        messages = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.WARNING, "[WARN] No available agent") in messages
        assert (logging.ERROR, "[ERROR] boom") in messages
        warn_record = next(r for r in caplog.records if r.levelno == logging.WARNING)
        assert warn_record.job_id == "job_1"


class TestEventLogBounds:
    """Tests for the ring buffer bound."""

    def test_recent_after_150_appends(self, event_log):
        """Test that recent(50) returns the last 50 oldest-first."""
        for i in range(150):
            event_log.append(LogType.INFO, f"msg {i}")

        recent = event_log.recent(50)
        assert len(recent) == 50
        assert [e.message for e in recent] == [f"msg {i}" for i in range(100, 150)]
        assert len(event_log) == 100

    def test_oldest_entries_evicted(self, event_log):
        for i in range(101):
            event_log.append(LogType.INFO, f"msg {i}")

        assert event_log.recent(100)[0].message == "msg 1"

    def test_recent_default_is_fifty(self, event_log):
        for i in range(60):
            event_log.append(LogType.INFO, f"msg {i}")

        assert len(event_log.recent()) == 50

    def test_recent_with_fewer_entries(self, event_log):
        event_log.append(LogType.INFO, "only")
        assert [e.message for e in event_log.recent(50)] == ["only"]

    def test_recent_zero(self, event_log):
        event_log.append(LogType.INFO, "x")
        assert event_log.recent(0) == []

    def test_custom_capacity(self):
        log = EventLog(capacity=3)
        for i in range(5):
            log.append(LogType.INFO, str(i))
        assert [e.message for e in log.recent()] == ["2", "3", "4"]

    def test_clear(self, event_log):
        event_log.append(LogType.INFO, "x")
        event_log.clear()
        assert event_log.recent() == []
