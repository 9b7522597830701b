"""Tests for the matching policy."""

import pytest

from swarm.matching import score, select_agent, skills_overlap
from swarm.models import Subtask
from swarm.registry import AgentRegistry


class TestScore:
    """Tests for score()."""

    def test_full_overlap(self):
        assert score(["frontend", "typescript", "react", "css"], ["frontend", "react", "css"]) == 1.0

    def test_partial_overlap(self):
        assert score(["docs", "testing"], ["docs", "testing", "coding"]) == pytest.approx(2 / 3)

    def test_no_overlap(self):
        assert score(["backend", "node"], ["solidity"]) == 0.0

    def test_substring_either_direction(self):
        assert skills_overlap("react-native", "react")
        assert skills_overlap("api", "graphql-api")
        assert score(["react-native"], ["react"]) == 1.0

    def test_empty_required_skills(self):
        """Test that no required skills divides by one and scores zero."""
        assert score(["frontend"], []) == 0.0

    def test_empty_agent_skills(self):
        assert score([], ["frontend"]) == 0.0


class TestSelectAgent:
    """Tests for select_agent()."""

    def test_picks_highest_score(self, registry):
        task = Subtask(id=1, name="Smart Contract/Web3", skills=["blockchain", "solidity"])
        assert select_agent(task, registry) == "GAMMA-03"

    def test_tie_goes_to_first_registered(self):
        registry = AgentRegistry(
            [
                {"id": "FIRST", "skills": ["python"]},
                {"id": "SECOND", "skills": ["python"]},
            ]
        )
        task = Subtask(id=1, name="t", skills=["python"])
        assert select_agent(task, registry) == "FIRST"

    def test_zero_score_agent_is_still_selected(self):
        """Test that an idle agent is picked even with no skill overlap."""
        registry = AgentRegistry([{"id": "DESIGNER", "skills": ["design"]}])
        task = Subtask(id=1, name="t", skills=["solidity"])
        assert select_agent(task, registry) == "DESIGNER"

    def test_skips_busy_agents(self, registry):
        registry.mark_busy("GAMMA-03", task_id=1, job_id="job_x")
        task = Subtask(id=2, name="t", skills=["blockchain", "solidity"])
        assert select_agent(task, registry) != "GAMMA-03"

    def test_skips_offline_agents(self):
        registry = AgentRegistry(
            [
                {"id": "OFF", "skills": ["solidity"], "status": "offline"},
                {"id": "ON", "skills": ["css"]},
            ]
        )
        task = Subtask(id=1, name="t", skills=["solidity"])
        assert select_agent(task, registry) == "ON"

    def test_no_idle_agent_returns_none(self):
        registry = AgentRegistry([{"id": "ONLY", "skills": ["css"]}])
        registry.mark_busy("ONLY", task_id=1)
        assert select_agent(Subtask(id=2, name="t", skills=["css"]), registry) is None

    def test_find_idle_candidate_delegates_to_policy(self, registry):
        agent = registry.find_idle_candidate(["backend", "node", "api"])
        assert agent.id == "BETA-02"
