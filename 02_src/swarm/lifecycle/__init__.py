"""Lifecycle module."""

from .manager import JobManager, new_job_id

__all__ = ["JobManager", "new_job_id"]
