"""Core data models for the SWARM coordinator."""

from .agents import Agent, AgentStatus
from .bounties import BountySummary, WorkItem, normalize_reward
from .logs import LogEntry, LogType
from .tasks import Assignment, Job, JobStatus, Subtask, TaskStatus

__all__ = [
    # Agents
    "Agent",
    "AgentStatus",
    # Bounties
    "WorkItem",
    "BountySummary",
    "normalize_reward",
    # Tasks
    "Subtask",
    "TaskStatus",
    "Job",
    "JobStatus",
    "Assignment",
    # Logs
    "LogEntry",
    "LogType",
]
