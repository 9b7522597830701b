"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings
from ..coordinator import Coordinator
from .routes import (
    create_agents_router,
    create_bounties_router,
    create_control_router,
    create_jobs_router,
    create_observability_router,
)


def create_fastapi_app(
    coordinator: Coordinator | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure FastAPI application around one coordinator."""
    settings = settings or Settings.from_env()
    coordinator = coordinator or Coordinator(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await coordinator.start()
        yield
        await coordinator.stop()

    fastapi_app = FastAPI(
        title="SWARM Coordinator API",
        description="Multi-agent coordination service for bounty hunting",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.coordinator = coordinator

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    fastapi_app.include_router(create_agents_router(coordinator))
    fastapi_app.include_router(create_bounties_router(coordinator))
    fastapi_app.include_router(create_jobs_router(coordinator))
    fastapi_app.include_router(create_observability_router(coordinator))
    fastapi_app.include_router(create_control_router(coordinator))

    return fastapi_app
