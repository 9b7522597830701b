"""Job and subtask lifecycle: assignment, completion and agent release."""

import uuid
from datetime import datetime, timezone
from typing import Callable

from ..errors import NotFoundError
from ..event_log import IEventLog
from ..logging_config import get_logger
from ..matching import select_agent
from ..models import Assignment, Job, JobStatus, LogType, Subtask, TaskStatus
from ..registry import IAgentRegistry
from ..storage import IJobStore

logger = get_logger(__name__)


def new_job_id() -> str:
    """Random job identifier, unique regardless of creation rate."""
    return f"job_{uuid.uuid4().hex}"


class JobManager:
    """Creates jobs, applies completion transitions and frees agents.

    The caller is responsible for serializing calls; both operations read
    and then write agent availability.
    """

    def __init__(
        self,
        registry: IAgentRegistry,
        store: IJobStore,
        event_log: IEventLog,
        id_factory: Callable[[], str] = new_job_id,
    ):
        self._registry = registry
        self._store = store
        self._event_log = event_log
        self._id_factory = id_factory

    def create_job(
        self, bounty_id: str, subtasks: list[Subtask]
    ) -> tuple[Job, list[Assignment]]:
        """Match every subtask in order and store a running job."""
        job_id = self._id_factory()
        assignments: list[Assignment] = []

        for task in subtasks:
            agent_id = select_agent(task, self._registry)
            if agent_id:
                self._registry.mark_busy(agent_id, task.id, job_id)
                task.assigned_to = agent_id
                task.status = TaskStatus.ASSIGNED
                assignments.append(
                    Assignment(task_id=task.id, task_name=task.name, agent_id=agent_id)
                )
                self._event_log.append(
                    LogType.SUCCESS, f'Assigned "{task.name}" to {agent_id}', job_id
                )
            else:
                task.status = TaskStatus.UNASSIGNED
                self._event_log.append(
                    LogType.WARN, f'No available agent for "{task.name}"', job_id
                )

        job = Job(
            id=job_id,
            bounty_id=bounty_id,
            subtasks=subtasks,
            created_at=datetime.now(timezone.utc),
        )
        if job.all_completed:
            # Nothing to wait for
            job.status = JobStatus.COMPLETED
            job.completed_at = job.created_at
        self._store.save_job(job)
        logger.debug(
            "Job %s stored with %s/%s subtasks assigned",
            job_id,
            len(assignments),
            len(subtasks),
        )
        return job, assignments

    def complete_task(
        self, job_id: str, task_id: int, result=None
    ) -> tuple[Subtask, JobStatus]:
        """Mark a subtask completed, free its agent, and close the job when done."""
        job = self._store.get_job(job_id)
        task = job.get_task(task_id)
        if task is None:
            raise NotFoundError(f"Task not found: {task_id} in job {job_id}")

        if task.status == TaskStatus.COMPLETED:
            return task, job.status

        task.status = TaskStatus.COMPLETED
        task.result = result
        task.completed_at = datetime.now(timezone.utc)

        if task.assigned_to:
            self._registry.mark_idle(task.assigned_to)

        self._event_log.append(LogType.SUCCESS, f'Task "{task.name}" completed', job_id)

        if job.all_completed:
            job.status = JobStatus.COMPLETED
            job.completed_at = datetime.now(timezone.utc)
            self._event_log.append(
                LogType.SUCCESS, f"Job {job_id} fully completed!", job_id
            )

        return task, job.status

    def get_job(self, job_id: str) -> Job:
        return self._store.get_job(job_id)

    def list_jobs(self) -> list[Job]:
        return self._store.list_jobs()
