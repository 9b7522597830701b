"""Skill-overlap scoring and greedy agent selection.

An agent skill overlaps a required skill when either string contains the
other ("react" overlaps "react-native"). The score is the number of
overlapping agent skills divided by the number of required skills, so it
stays within [0, 1] for agents whose skills are distinct.

Selection walks the idle agents in registration order and keeps the first
agent with the strictly highest score. An idle agent that overlaps nothing
still wins when nobody scores higher, so a subtask only goes unmatched when
no agent is idle at all.
"""

from typing import Iterable, Protocol

from ..models import Agent, Subtask


class IdleAgentSource(Protocol):
    """Anything that can enumerate idle agents in a stable order."""

    def idle_agents(self) -> list[Agent]:
        ...


def skills_overlap(agent_skill: str, required_skill: str) -> bool:
    """Fuzzy skill comparison: substring containment in either direction."""
    return required_skill in agent_skill or agent_skill in required_skill


def score(agent_skills: Iterable[str], required_skills: Iterable[str]) -> float:
    """Fraction of required skills covered by the agent's skills."""
    required = list(required_skills)
    matched = [
        skill
        for skill in agent_skills
        if any(skills_overlap(skill, req) for req in required)
    ]
    return len(matched) / max(len(required), 1)


def pick_best(agents: Iterable[Agent], required_skills: Iterable[str]) -> Agent | None:
    """First agent with the strictly highest score, or None for no agents."""
    required = list(required_skills)
    best_agent: Agent | None = None
    best_score = -1.0

    for agent in agents:
        agent_score = score(agent.skills, required)
        if agent_score > best_score:
            best_score = agent_score
            best_agent = agent

    return best_agent


def select_agent(task: Subtask, registry: IdleAgentSource) -> str | None:
    """Choose an idle agent id for a subtask, or None if nobody is idle."""
    agent = pick_best(registry.idle_agents(), task.skills)
    return agent.id if agent else None
