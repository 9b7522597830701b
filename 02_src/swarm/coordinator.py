"""Coordinator bootstrap and the operation surface."""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Protocol

from .bounties import HttpBountySource, IBountySource, find_work_item
from .config import RECENT_LOG_LIMIT, Settings
from .decomposition import decompose
from .errors import InvalidRequestError, UpstreamError
from .event_log import EventLog
from .lifecycle import JobManager
from .logging_config import get_logger
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
    WorkItem,
)
from .registry import AgentRegistry, load_roster
from .storage import JobStore

logger = get_logger(__name__)


@dataclass
class DecomposeResult:
    bounty: BountySummary
    subtasks: list[Subtask]

    def to_dict(self) -> dict:
        return {
            "bounty": self.bounty.to_dict(),
            "subtasks": [task.to_dict() for task in self.subtasks],
        }


@dataclass
class AssignResult:
    job_id: str
    assignments: list[Assignment]
    subtasks: list[Subtask]

    def to_dict(self) -> dict:
        return {
            "job_id": self.job_id,
            "assignments": [a.to_dict() for a in self.assignments],
            "subtasks": [task.to_dict() for task in self.subtasks],
        }


@dataclass
class CoordinateResult:
    bounty: BountySummary
    job_id: str
    assignments: list[Assignment]
    subtasks: list[Subtask]

    def to_dict(self) -> dict:
        return {
            "bounty": self.bounty.to_dict(),
            "job_id": self.job_id,
            "assignments": [a.to_dict() for a in self.assignments],
            "subtasks": [task.to_dict() for task in self.subtasks],
        }


def require_bounty_id(bounty_id: Any) -> str:
    if bounty_id is None or str(bounty_id).strip() == "":
        raise InvalidRequestError("bounty_id required")
    return str(bounty_id)


def subtask_from_dict(data: dict) -> Subtask:
    """Rebuild a caller-supplied subtask as a fresh pending one."""
    try:
        task_id = int(data["id"])
        name = str(data["name"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidRequestError(f"Invalid subtask {data!r}: {e}") from e

    skills = data.get("skills") or []
    if not isinstance(skills, list):
        raise InvalidRequestError(f"Subtask {task_id} skills must be a list")
    return Subtask(id=task_id, name=name, skills=[str(s) for s in skills])


def require_unique_ids(tasks: list[Subtask]) -> None:
    seen: set[int] = set()
    for task in tasks:
        if task.id in seen:
            raise InvalidRequestError(f"Duplicate subtask id: {task.id}")
        seen.add(task.id)


class ICoordinator(Protocol):
    """Bootstrap, lifecycle and operations."""

    async def start(self) -> None:
        """Open the bounty source and announce the roster."""
        ...

    async def stop(self) -> None:
        """Close the bounty source."""
        ...

    async def reset(self) -> None:
        """Drop jobs and logs, free all agents."""
        ...


class Coordinator:
    """Single owner of the agent registry, job table and event log.

    Every registry or job mutation runs under one lock. The bounty fetch
    is awaited outside it.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        bounty_source: IBountySource | None = None,
        registry: AgentRegistry | None = None,
        event_log: EventLog | None = None,
    ):
        self._settings = settings or Settings.from_env()
        if registry is None:
            registry = AgentRegistry(load_roster(self._settings.roster_path))
        if bounty_source is None:
            bounty_source = HttpBountySource(
                api_url=self._settings.bounty_api_url,
                timeout=self._settings.bounty_api_timeout,
            )
        self._registry = registry
        self._store = JobStore()
        self._event_log = event_log if event_log is not None else EventLog()
        self._jobs = JobManager(self._registry, self._store, self._event_log)
        self._source = bounty_source
        self._lock = asyncio.Lock()
        self._started_at = time.monotonic()

    async def start(self) -> None:
        """Open the bounty source and announce the roster."""
        logger.info("Starting coordinator")
        await self._source.start()
        self._started_at = time.monotonic()
        self._event_log.append(LogType.INFO, "SWARM Coordinator started")
        self._event_log.append(LogType.INFO, f"{len(self._registry)} agents registered")

    async def stop(self) -> None:
        """Close the bounty source."""
        await self._source.stop()
        logger.info("Coordinator stopped")

    async def reset(self) -> None:
        """Drop jobs and logs, free all agents."""
        async with self._lock:
            self._store.clear()
            self._event_log.clear()
            self._registry.reset()
        logger.info("Reset complete")

    # Agents

    def list_agents(self) -> list[Agent]:
        return self._registry.list_agents()

    def get_agent(self, agent_id: str) -> Agent:
        return self._registry.get_agent(agent_id)

    # Bounties

    async def _fetch_bounty(self, bounty_id: str) -> WorkItem:
        self._event_log.append(LogType.INFO, f"Fetching bounty #{bounty_id}...")
        try:
            items = await self._source.fetch_work_items()
        except UpstreamError as e:
            self._event_log.append(LogType.ERROR, str(e))
            raise
        return find_work_item(items, bounty_id)

    async def decompose(self, bounty_id: Any) -> DecomposeResult:
        """Fetch a bounty and split it into subtasks."""
        bounty_id = require_bounty_id(bounty_id)
        item = await self._fetch_bounty(bounty_id)

        self._event_log.append(LogType.INFO, f'Decomposing: "{item.title}"')
        subtasks = decompose(item)
        self._event_log.append(LogType.SUCCESS, f"Created {len(subtasks)} subtasks")

        return DecomposeResult(
            bounty=BountySummary.from_work_item(item), subtasks=subtasks
        )

    async def assign(
        self, bounty_id: Any, subtasks: list[Subtask | dict] | None
    ) -> AssignResult:
        """Create a job and match each subtask to an idle agent."""
        bounty_id = require_bounty_id(bounty_id)
        if subtasks is None:
            raise InvalidRequestError("bounty_id and subtasks required")

        tasks = [
            task if isinstance(task, Subtask) else subtask_from_dict(task)
            for task in subtasks
        ]
        require_unique_ids(tasks)
        async with self._lock:
            job, assignments = self._jobs.create_job(bounty_id, tasks)

        return AssignResult(job_id=job.id, assignments=assignments, subtasks=job.subtasks)

    async def coordinate(self, bounty_id: Any) -> CoordinateResult:
        """Decompose a bounty and assign its subtasks in one step."""
        decomposed = await self.decompose(bounty_id)
        assigned = await self.assign(decomposed.bounty.id, decomposed.subtasks)
        return CoordinateResult(
            bounty=decomposed.bounty,
            job_id=assigned.job_id,
            assignments=assigned.assignments,
            subtasks=assigned.subtasks,
        )

    # Jobs

    async def complete_task(
        self, job_id: str | None, task_id: int | None, result: Any = None
    ) -> tuple[Subtask, JobStatus]:
        """Record an external completion signal for a subtask."""
        if not job_id or task_id is None:
            raise InvalidRequestError("job_id and task_id required")

        async with self._lock:
            return self._jobs.complete_task(job_id, task_id, result)

    def get_job(self, job_id: str) -> Job:
        return self._jobs.get_job(job_id)

    def list_jobs(self) -> list[Job]:
        return self._jobs.list_jobs()

    # Observability

    def recent_logs(self, n: int = RECENT_LOG_LIMIT) -> list[LogEntry]:
        return self._event_log.recent(n)

    def status(self) -> dict:
        agents = self._registry.list_agents()
        return {
            "system_status": "operational",
            "agents": {
                "total": len(agents),
                "online": sum(1 for a in agents if a.status != AgentStatus.OFFLINE),
                "busy": self._registry.count_by_status(AgentStatus.BUSY),
            },
            "jobs": {
                "total": len(self._store),
                "active": self._store.count_active(),
            },
            "uptime": time.monotonic() - self._started_at,
        }

    @property
    def registry(self) -> AgentRegistry:
        return self._registry

    @property
    def store(self) -> JobStore:
        return self._store

    @property
    def event_log(self) -> EventLog:
        return self._event_log
