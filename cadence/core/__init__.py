"""Core scheduler components."""

from cadence.core.common import (
    JobAlreadyExistsError,
    JobNotFoundError,
    MalformedScheduleError,
    PatternKind,
    SchedulerConfigurationError,
    SchedulerError,
    SchedulerLookupError,
    SchedulerStateError,
)
from cadence.core.execution import DueJobHandler, JobRunner
from cadence.core.jobs import RoutineJob, RoutineJobDefinition
from cadence.core.registry import JobRegistry
from cadence.core.schedulers import RoutineScheduler
from cadence.core.triggers import DEDUP_WINDOW, Schedule, TriggerEvaluator

__all__ = [
    # Common Types
    "PatternKind",
    # Exceptions
    "SchedulerError",
    "SchedulerConfigurationError",
    "MalformedScheduleError",
    "SchedulerLookupError",
    "JobAlreadyExistsError",
    "JobNotFoundError",
    "SchedulerStateError",
    # Triggers
    "Schedule",
    "TriggerEvaluator",
    "DEDUP_WINDOW",
    # Jobs
    "RoutineJob",
    "RoutineJobDefinition",
    "JobRegistry",
    # Execution
    "DueJobHandler",
    "JobRunner",
    # Scheduler
    "RoutineScheduler",
]
