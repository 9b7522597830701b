"""Control API routes."""

from pydantic import BaseModel
from fastapi import APIRouter

from ...coordinator import ICoordinator


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_control_router(coordinator: ICoordinator) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.post("/reset", response_model=StatusResponse)
    async def reset_system() -> dict:
        """Drop all jobs and logs and free every agent."""
        await coordinator.reset()
        return {"status": "ok"}

    return router
