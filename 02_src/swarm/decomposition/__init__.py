"""Decomposition module."""

from .decomposer import RULES, DecompositionRule, decompose

__all__ = ["DecompositionRule", "RULES", "decompose"]
