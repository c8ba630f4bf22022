"""Scheduler implementations."""

from cadence.core.schedulers.polling_scheduler import RoutineScheduler

__all__ = ["RoutineScheduler"]
