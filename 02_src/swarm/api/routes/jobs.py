"""Job API routes."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter

from ...coordinator import Coordinator
from ...errors import CoordinatorError
from ..errors import http_error


class CompleteRequest(BaseModel):
    """Request model for marking a subtask completed."""

    model_config = ConfigDict(populate_by_name=True)

    job_id: str | None = Field(default=None, alias="jobId")
    task_id: int | None = Field(default=None, alias="taskId")
    result: Any = None


def create_jobs_router(coordinator: Coordinator) -> APIRouter:
    """Create jobs router."""
    router = APIRouter(prefix="/api", tags=["jobs"])

    @router.post("/complete")
    async def complete_task(request: CompleteRequest) -> dict:
        """Mark a subtask completed."""
        try:
            task, job_status = await coordinator.complete_task(
                request.job_id, request.task_id, request.result
            )
        except CoordinatorError as e:
            raise http_error(e)
        return {"task": task.to_dict(), "job_status": job_status.value}

    @router.get("/jobs")
    async def list_jobs() -> dict:
        """List all jobs."""
        return {"jobs": [job.to_dict() for job in coordinator.list_jobs()]}

    @router.get("/jobs/{job_id}")
    async def get_job(job_id: str) -> dict:
        """Get one job."""
        try:
            job = coordinator.get_job(job_id)
        except CoordinatorError as e:
            raise http_error(e)
        return {"job": job.to_dict()}

    return router
