"""Agent API routes."""

from fastapi import APIRouter

from ...coordinator import Coordinator
from ...errors import CoordinatorError
from ..errors import http_error


def create_agents_router(coordinator: Coordinator) -> APIRouter:
    """Create agents router."""
    router = APIRouter(prefix="/api/agents", tags=["agents"])

    @router.get("")
    async def list_agents() -> dict:
        """List all agents."""
        return {"agents": [agent.to_dict() for agent in coordinator.list_agents()]}

    @router.get("/{agent_id}")
    async def get_agent(agent_id: str) -> dict:
        """Get one agent."""
        try:
            agent = coordinator.get_agent(agent_id)
        except CoordinatorError as e:
            raise http_error(e)
        return {"agent": agent.to_dict()}

    return router
