"""Observability API routes."""

from fastapi import APIRouter, Query

from ...config import MAX_LOG_ENTRIES, RECENT_LOG_LIMIT
from ...coordinator import Coordinator


def create_observability_router(coordinator: Coordinator) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/logs")
    async def get_logs(
        limit: int = Query(RECENT_LOG_LIMIT, ge=1, le=MAX_LOG_ENTRIES),
    ) -> dict:
        """Get recent event log entries, oldest first."""
        return {"logs": [entry.to_dict() for entry in coordinator.recent_logs(limit)]}

    @router.get("/status")
    async def get_status() -> dict:
        """System status: agent and job counts plus uptime."""
        return coordinator.status()

    return router
