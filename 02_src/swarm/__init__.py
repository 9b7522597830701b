"""SWARM coordinator: assigns bounty subtasks to a fixed pool of agents."""

from .bounties import HttpBountySource, IBountySource
from .config import Settings
from .coordinator import (
    AssignResult,
    CoordinateResult,
    Coordinator,
    DecomposeResult,
    ICoordinator,
)
from .decomposition import decompose
from .errors import (
    AgentUnavailableError,
    CoordinatorError,
    InvalidRequestError,
    NotFoundError,
    UpstreamError,
)
from .event_log import EventLog, IEventLog
from .lifecycle import JobManager
from .matching import score, select_agent
from .models import (
    Agent,
    AgentStatus,
    Assignment,
    BountySummary,
    Job,
    JobStatus,
    LogEntry,
    LogType,
    Subtask,
    TaskStatus,
    WorkItem,
)
from .registry import AgentRegistry, IAgentRegistry
from .storage import IJobStore, JobStore

__all__ = [
    # Coordinator
    "Coordinator",
    "ICoordinator",
    "Settings",
    "DecomposeResult",
    "AssignResult",
    "CoordinateResult",
    # Models
    "Agent",
    "AgentStatus",
    "Subtask",
    "TaskStatus",
    "Job",
    "JobStatus",
    "Assignment",
    "WorkItem",
    "BountySummary",
    "LogEntry",
    "LogType",
    # Components
    "IAgentRegistry",
    "AgentRegistry",
    "IJobStore",
    "JobStore",
    "IEventLog",
    "EventLog",
    "JobManager",
    "IBountySource",
    "HttpBountySource",
    "decompose",
    "score",
    "select_agent",
    # Errors
    "CoordinatorError",
    "InvalidRequestError",
    "NotFoundError",
    "UpstreamError",
    "AgentUnavailableError",
]
