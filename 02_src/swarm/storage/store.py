"""In-memory job storage."""

from typing import Protocol

from ..errors import NotFoundError
from ..models import Job, JobStatus, TaskStatus


class IJobStore(Protocol):
    """Job table for the process lifetime (no persistence)."""

    def save_job(self, job: Job) -> None:
        """Save a job."""
        ...

    def get_job(self, job_id: str) -> Job:
        """Get a job or raise NotFoundError."""
        ...

    def list_jobs(self) -> list[Job]:
        """Get all jobs in creation order."""
        ...

    def clear(self) -> None:
        """Clear all jobs."""
        ...


class JobStore:
    """Dict-backed job table; insertion order is creation order."""

    def __init__(self):
        self._jobs: dict[str, Job] = {}

    def __len__(self) -> int:
        return len(self._jobs)

    def save_job(self, job: Job) -> None:
        """Save a job."""
        self._jobs[job.id] = job

    def get_job(self, job_id: str) -> Job:
        """Get a job or raise NotFoundError."""
        job = self._jobs.get(job_id)
        if job is None:
            raise NotFoundError(f"Job not found: {job_id}")
        return job

    def list_jobs(self) -> list[Job]:
        """Get all jobs in creation order."""
        return list(self._jobs.values())

    def count_active(self) -> int:
        return sum(1 for job in self._jobs.values() if job.status == JobStatus.RUNNING)

    def count_tasks(self, status: TaskStatus) -> int:
        return sum(
            1
            for job in self._jobs.values()
            for task in job.subtasks
            if task.status == status
        )

    def clear(self) -> None:
        """Clear all jobs."""
        self._jobs.clear()
