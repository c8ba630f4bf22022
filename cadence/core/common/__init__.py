"""Common components shared across core modules."""

from cadence.core.common.exceptions import (
    JobAlreadyExistsError,
    JobNotFoundError,
    MalformedScheduleError,
    SchedulerConfigurationError,
    SchedulerError,
    SchedulerLookupError,
    SchedulerStateError,
)
from cadence.core.common.types import PatternKind

__all__ = [
    # Types
    "PatternKind",
    # Exceptions
    "SchedulerError",
    "SchedulerConfigurationError",
    "MalformedScheduleError",
    "SchedulerLookupError",
    "JobAlreadyExistsError",
    "JobNotFoundError",
    "SchedulerStateError",
]
