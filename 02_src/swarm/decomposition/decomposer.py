"""Rule-based decomposition of a bounty into subtasks.

Each rule looks at the bounty's tags (exact membership) and at its
lower-cased description (substring match). Rules fire independently and
in table order, each contributing at most one subtask. Documentation and
testing is always added. When nothing else fired, a generic core
implementation subtask is put in front so every bounty yields at least
two subtasks.
"""

from dataclasses import dataclass

from ..models import Subtask, WorkItem


@dataclass(frozen=True)
class DecompositionRule:
    """Trigger tags/keywords and the subtask they produce."""

    name: str
    skills: tuple[str, ...]
    tags: frozenset[str] = frozenset()
    keywords: tuple[str, ...] = ()

    def matches(self, tags: set[str], description: str) -> bool:
        if self.tags & tags:
            return True
        return any(keyword in description for keyword in self.keywords)


RULES: tuple[DecompositionRule, ...] = (
    DecompositionRule(
        name="UI/Frontend Development",
        skills=("frontend", "react", "css"),
        tags=frozenset({"frontend", "ui", "dashboard", "widget"}),
        keywords=("frontend", "ui"),
    ),
    DecompositionRule(
        name="API/Backend Development",
        skills=("backend", "node", "api"),
        tags=frozenset({"backend", "api", "server"}),
        keywords=("api", "backend"),
    ),
    DecompositionRule(
        name="Smart Contract/Web3",
        skills=("blockchain", "solidity"),
        tags=frozenset({"blockchain", "web3", "contract", "onchain"}),
        keywords=("contract", "blockchain"),
    ),
)

DOCS_TASK = ("Documentation & Testing", ("docs", "testing"))
CORE_TASK = ("Core Implementation", ("coding",))


def decompose(item: WorkItem) -> list[Subtask]:
    """Split a bounty into ordered, pending subtasks numbered from 1."""
    tags = set(item.tags)
    description = (item.description or "").lower()

    specs: list[tuple[str, tuple[str, ...]]] = [
        (rule.name, rule.skills)
        for rule in RULES
        if rule.matches(tags, description)
    ]
    specs.append(DOCS_TASK)

    if len(specs) == 1:
        specs.insert(0, CORE_TASK)

    return [
        Subtask(id=index, name=name, skills=list(skills))
        for index, (name, skills) in enumerate(specs, start=1)
    ]
