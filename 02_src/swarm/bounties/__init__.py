"""Bounty source module."""

from .source import HttpBountySource, IBountySource, find_work_item

__all__ = ["HttpBountySource", "IBountySource", "find_work_item"]
