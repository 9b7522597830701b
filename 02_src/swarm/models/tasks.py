"""Subtask and job data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Subtask lifecycle states.

    pending -> assigned -> completed, or pending -> unassigned when no
    idle agent was found. An unassigned subtask can still be completed
    by hand.
    """

    PENDING = "pending"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    COMPLETED = "completed"


class JobStatus(str, Enum):
    """Job lifecycle states."""

    RUNNING = "running"
    COMPLETED = "completed"


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass
class Subtask:
    """A decomposed unit of a bounty, scoped to one skill category."""

    id: int
    name: str
    skills: list[str]
    status: TaskStatus = TaskStatus.PENDING
    progress: int = 0
    assigned_to: str | None = None
    result: Any = None
    completed_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "skills": list(self.skills),
            "status": self.status.value,
            "progress": self.progress,
            "assigned_to": self.assigned_to,
            "result": self.result,
            "completed_at": _iso(self.completed_at),
        }


@dataclass
class Assignment:
    """A subtask that was matched to an agent."""

    task_id: int
    task_name: str
    agent_id: str

    def to_dict(self) -> dict:
        return {
            "task_id": self.task_id,
            "task_name": self.task_name,
            "agent_id": self.agent_id,
        }


@dataclass
class Job:
    """All subtasks produced from one bounty, with overall status."""

    id: str
    bounty_id: str
    subtasks: list[Subtask]
    created_at: datetime
    status: JobStatus = JobStatus.RUNNING
    completed_at: datetime | None = None

    def get_task(self, task_id: int) -> Subtask | None:
        for task in self.subtasks:
            if task.id == task_id:
                return task
        return None

    @property
    def all_completed(self) -> bool:
        return all(task.status == TaskStatus.COMPLETED for task in self.subtasks)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "bounty_id": self.bounty_id,
            "subtasks": [task.to_dict() for task in self.subtasks],
            "status": self.status.value,
            "created_at": _iso(self.created_at),
            "completed_at": _iso(self.completed_at),
        }
