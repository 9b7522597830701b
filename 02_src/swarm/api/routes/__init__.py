"""API routers."""

from .agents import create_agents_router
from .bounties import create_bounties_router
from .control import create_control_router
from .jobs import create_jobs_router
from .observability import create_observability_router

__all__ = [
    "create_agents_router",
    "create_bounties_router",
    "create_control_router",
    "create_jobs_router",
    "create_observability_router",
]
