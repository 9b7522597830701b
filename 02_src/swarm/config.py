"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_BOUNTY_API_URL = "https://bounty.owockibot.xyz"
DEFAULT_BOUNTY_API_TIMEOUT = 10.0

MAX_LOG_ENTRIES = 100
RECENT_LOG_LIMIT = 50
REWARD_SCALE = 1_000_000


PathLike = Union[str, Path]


def resolve_path(env_value: PathLike | None) -> Path | None:
    """Resolve a configured path relative to the project root."""
    if not env_value:
        return None

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime settings, read from the environment."""

    api_host: str = "localhost"
    api_port: int = 8000
    bounty_api_url: str = DEFAULT_BOUNTY_API_URL
    bounty_api_timeout: float = DEFAULT_BOUNTY_API_TIMEOUT
    roster_path: Path | None = None
    log_level: str = "INFO"
    log_file: Path = DEFAULT_LOG_PATH
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            api_host=os.getenv("API_HOST", "localhost"),
            api_port=int(os.getenv("API_PORT", "8000")),
            bounty_api_url=os.getenv("BOUNTY_API_URL", DEFAULT_BOUNTY_API_URL).rstrip("/"),
            bounty_api_timeout=float(
                os.getenv("BOUNTY_API_TIMEOUT", str(DEFAULT_BOUNTY_API_TIMEOUT))
            ),
            roster_path=resolve_path(os.getenv("SWARM_ROSTER_PATH")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=resolve_path(os.getenv("LOG_FILE")) or DEFAULT_LOG_PATH,
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
        )
