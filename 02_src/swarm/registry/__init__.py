"""Agent registry module."""

from .registry import (
    DEFAULT_ROSTER,
    AgentRegistry,
    IAgentRegistry,
    build_agent,
    load_roster,
)

__all__ = [
    "AgentRegistry",
    "IAgentRegistry",
    "DEFAULT_ROSTER",
    "build_agent",
    "load_roster",
]
