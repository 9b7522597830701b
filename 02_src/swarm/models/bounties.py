"""Bounty (work item) data models."""

from dataclasses import dataclass, field
from typing import Any

from ..config import REWARD_SCALE


def normalize_reward(raw: Any) -> float | None:
    """Scale a micro-unit reward to whole units; None when not numeric."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return float(raw) / REWARD_SCALE
    except (TypeError, ValueError):
        return None


@dataclass
class WorkItem:
    """A bounty as delivered by the bounty source."""

    id: str
    title: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    reward: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "WorkItem":
        """Build from a raw bounty object. Raises ValueError on bad tags."""
        tags = data.get("tags") or []
        if not isinstance(tags, list):
            raise ValueError(f"Bounty {data.get('id')!r} tags must be a list")

        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            tags=[str(tag) for tag in tags],
            reward=data.get("reward"),
        )


@dataclass
class BountySummary:
    """Caller-facing view of a bounty."""

    id: str
    title: str
    reward: float | None
    tags: list[str]

    @classmethod
    def from_work_item(cls, item: WorkItem) -> "BountySummary":
        return cls(
            id=item.id,
            title=item.title,
            reward=normalize_reward(item.reward),
            tags=list(item.tags),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "reward": self.reward,
            "tags": list(self.tags),
        }
