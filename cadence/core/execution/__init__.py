"""Execution of due routine jobs."""

from cadence.core.execution.callbacks import DueJobHandler
from cadence.core.execution.job_runner import JobRunner

__all__ = [
    "DueJobHandler",
    "JobRunner",
]
