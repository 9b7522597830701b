"""Matching policy module."""

from .policy import pick_best, score, select_agent, skills_overlap

__all__ = ["pick_best", "score", "select_agent", "skills_overlap"]
