"""Agent registry: the fixed roster and its availability state."""

import json
from pathlib import Path
from typing import Protocol

from ..errors import AgentUnavailableError, InvalidRequestError, NotFoundError
from ..logging_config import get_logger
from ..matching import pick_best
from ..models import Agent, AgentStatus

logger = get_logger(__name__)


DEFAULT_ROSTER: list[dict] = [
    {"id": "ALPHA-01", "skills": ["frontend", "typescript", "react", "css"]},
    {"id": "BETA-02", "skills": ["backend", "python", "node", "api"]},
    {"id": "GAMMA-03", "skills": ["blockchain", "solidity", "web3"]},
    {"id": "DELTA-04", "skills": ["design", "content", "docs", "testing"]},
]


def load_roster(path: Path | None = None) -> list[dict]:
    """Read a roster from a JSON file (a list of agent objects)."""
    if path is None:
        return [dict(entry) for entry in DEFAULT_ROSTER]

    with open(path, encoding="utf-8") as f:
        roster = json.load(f)

    if not isinstance(roster, list):
        raise InvalidRequestError(f"Roster file {path} must contain a JSON list")

    logger.info("Loaded %s agents from %s", len(roster), path)
    return roster


def build_agent(entry: dict) -> Agent:
    """Create an Agent from a roster entry."""
    agent_id = entry.get("id")
    if not agent_id:
        raise InvalidRequestError("Roster entry requires an id")

    # Agents only become busy by taking a task
    status = entry.get("status", AgentStatus.ONLINE.value)
    if status not in (AgentStatus.ONLINE.value, AgentStatus.OFFLINE.value):
        raise InvalidRequestError(
            f"Roster entry {agent_id} has invalid status {status!r}"
        )

    return Agent(
        id=str(agent_id),
        name=str(entry.get("name") or agent_id),
        skills=[str(skill) for skill in entry.get("skills", [])],
        status=AgentStatus(status),
    )


class IAgentRegistry(Protocol):
    """Holds the agents and their availability."""

    def list_agents(self) -> list[Agent]:
        """Get all agents in registration order."""
        ...

    def get_agent(self, agent_id: str) -> Agent:
        """Get an agent or raise NotFoundError."""
        ...

    def idle_agents(self) -> list[Agent]:
        """Get agents that are online with no task."""
        ...

    def find_idle_candidate(self, required_skills: list[str]) -> Agent | None:
        """Best-matching idle agent, or None."""
        ...

    def mark_busy(self, agent_id: str, task_id: int, job_id: str | None = None) -> None:
        """Give an idle agent a task."""
        ...

    def mark_idle(self, agent_id: str) -> None:
        """Release an agent's task."""
        ...


class AgentRegistry:
    """In-memory registry built once from a roster."""

    def __init__(self, roster: list[dict] | None = None):
        self._roster = roster if roster is not None else load_roster()
        self._agents: dict[str, Agent] = {}
        self._build()

    def _build(self) -> None:
        self._agents = {}
        for entry in self._roster:
            agent = build_agent(entry)
            if agent.id in self._agents:
                raise InvalidRequestError(f"Duplicate agent id in roster: {agent.id}")
            self._agents[agent.id] = agent

    def __len__(self) -> int:
        return len(self._agents)

    def list_agents(self) -> list[Agent]:
        """Get all agents in registration order."""
        return list(self._agents.values())

    def get_agent(self, agent_id: str) -> Agent:
        """Get an agent or raise NotFoundError."""
        agent = self._agents.get(agent_id)
        if agent is None:
            raise NotFoundError(f"Agent not found: {agent_id}")
        return agent

    def idle_agents(self) -> list[Agent]:
        """Get agents that are online with no task."""
        return [agent for agent in self._agents.values() if agent.is_idle]

    def find_idle_candidate(self, required_skills: list[str]) -> Agent | None:
        """Best-matching idle agent, or None."""
        return pick_best(self.idle_agents(), required_skills)

    def mark_busy(self, agent_id: str, task_id: int, job_id: str | None = None) -> None:
        """Give an idle agent a task."""
        agent = self.get_agent(agent_id)
        if not agent.is_idle:
            raise AgentUnavailableError(
                f"Agent {agent_id} is {agent.status.value}, cannot take task {task_id}"
            )
        agent.status = AgentStatus.BUSY
        agent.current_task = task_id
        agent.current_job = job_id

    def mark_idle(self, agent_id: str) -> None:
        """Release an agent's task. Offline agents stay offline."""
        agent = self.get_agent(agent_id)
        agent.current_task = None
        agent.current_job = None
        if agent.status == AgentStatus.BUSY:
            agent.status = AgentStatus.ONLINE

    def reset(self) -> None:
        """Return every agent to its roster state."""
        self._build()

    def count_by_status(self, status: AgentStatus) -> int:
        return sum(1 for agent in self._agents.values() if agent.status == status)
