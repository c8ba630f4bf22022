"""Routine job definitions."""

from cadence.core.jobs.definition import RoutineJobDefinition
from cadence.core.jobs.routine import RoutineJob

__all__ = [
    "RoutineJobDefinition",
    "RoutineJob",
]
