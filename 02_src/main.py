"""Main entry point for the SWARM coordinator."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from swarm.api import create_fastapi_app
from swarm.config import Settings
from swarm.logging_config import setup_logging


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = Settings.from_env()
    setup_logging(log_level=settings.log_level, log_file=settings.log_file)

    app = create_fastapi_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
