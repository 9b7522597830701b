"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


SAMPLE_BOUNTIES = [
    {
        "id": 1,
        "title": "Build analytics dashboard",
        "description": "A React dashboard that reads from our API",
        "tags": ["dashboard"],
        "reward": "5000000",
    },
    {
        "id": "2",
        "title": "Plain task",
        "description": "",
        "tags": [],
        "reward": 1000000,
    },
    {
        "id": 3,
        "title": "Token vesting",
        "description": "Deploy a vesting contract",
        "tags": ["blockchain"],
        "reward": None,
    },
]


@pytest.fixture
def sample_bounties():
    """Sample bounties as the remote API returns them."""
    return [dict(data) for data in SAMPLE_BOUNTIES]


@pytest.fixture
def work_items(sample_bounties):
    """Sample bounties as WorkItems."""
    from swarm.models import WorkItem

    return [WorkItem.from_dict(data) for data in sample_bounties]


@pytest.fixture
def registry():
    """Create registry with the default roster."""
    from swarm.registry import AgentRegistry

    return AgentRegistry()


@pytest.fixture
def event_log():
    """Create empty event log."""
    from swarm.event_log import EventLog

    return EventLog()


@pytest.fixture
def store():
    """Create empty job store."""
    from swarm.storage import JobStore

    return JobStore()


@pytest.fixture
def job_manager(registry, store, event_log):
    """Create JobManager over registry, store and event log."""
    from swarm.lifecycle import JobManager

    return JobManager(registry=registry, store=store, event_log=event_log)


@pytest.fixture
def mock_source(work_items):
    """Create mock bounty source serving the sample bounties."""
    source = Mock()
    source.start = AsyncMock()
    source.stop = AsyncMock()
    source.fetch_work_items = AsyncMock(return_value=work_items)
    return source


@pytest.fixture
def make_coordinator(mock_source):
    """Factory for coordinators sharing the mock source."""
    from swarm.config import Settings
    from swarm.coordinator import Coordinator

    def _make(**kwargs):
        kwargs.setdefault("bounty_source", mock_source)
        return Coordinator(settings=Settings(), **kwargs)

    return _make


@pytest_asyncio.fixture
async def coordinator(make_coordinator):
    """Create and start a coordinator."""
    co = make_coordinator()
    await co.start()
    yield co
    await co.stop()
