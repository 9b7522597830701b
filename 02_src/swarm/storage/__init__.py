"""Storage module."""

from .store import IJobStore, JobStore

__all__ = ["IJobStore", "JobStore"]
