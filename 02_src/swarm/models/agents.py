"""Agent-related data models."""

from dataclasses import dataclass, field
from enum import Enum


class AgentStatus(str, Enum):
    """Availability of an agent."""

    ONLINE = "online"
    BUSY = "busy"
    OFFLINE = "offline"


@dataclass
class Agent:
    """A worker in the swarm with a skill set and availability state."""

    id: str
    name: str
    skills: list[str] = field(default_factory=list)
    status: AgentStatus = AgentStatus.ONLINE
    current_task: int | None = None
    current_job: str | None = None

    @property
    def is_idle(self) -> bool:
        return self.status == AgentStatus.ONLINE and self.current_task is None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "skills": list(self.skills),
            "status": self.status.value,
            "current_task": self.current_task,
            "current_job": self.current_job,
        }
