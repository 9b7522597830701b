"""Bounty decomposition and assignment routes."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter

from ...coordinator import Coordinator
from ...errors import CoordinatorError
from ..errors import http_error


class BountyRequest(BaseModel):
    """Request model naming a bounty."""

    model_config = ConfigDict(populate_by_name=True)

    bounty_id: str | int | None = Field(default=None, alias="bountyId")


class AssignRequest(BountyRequest):
    """Request model for assigning agents to subtasks."""

    subtasks: list[dict[str, Any]] | None = None


def create_bounties_router(coordinator: Coordinator) -> APIRouter:
    """Create bounties router."""
    router = APIRouter(prefix="/api", tags=["bounties"])

    @router.post("/decompose")
    async def decompose_bounty(request: BountyRequest) -> dict:
        """Decompose a bounty into subtasks."""
        try:
            result = await coordinator.decompose(request.bounty_id)
        except CoordinatorError as e:
            raise http_error(e)
        return result.to_dict()

    @router.post("/assign")
    async def assign_agents(request: AssignRequest) -> dict:
        """Assign agents to subtasks and start a job."""
        try:
            result = await coordinator.assign(request.bounty_id, request.subtasks)
        except CoordinatorError as e:
            raise http_error(e)
        return result.to_dict()

    @router.post("/coordinate")
    async def coordinate_bounty(request: BountyRequest) -> dict:
        """Decompose and assign in one step."""
        try:
            result = await coordinator.coordinate(request.bounty_id)
        except CoordinatorError as e:
            raise http_error(e)
        return result.to_dict()

    return router
