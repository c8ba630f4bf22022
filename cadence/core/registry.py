"""Registry of routine jobs keyed by name."""

import threading

from cadence.core.common.exceptions import JobAlreadyExistsError, JobNotFoundError
from cadence.core.jobs.routine import RoutineJob


class JobRegistry:
    """
    Thread-safe registry of routine jobs.

    Iteration order is registration order.

    Usage:
        >>> registry = JobRegistry()
        >>> registry.add(RoutineJob("weekly-report", "0 9 * * 1"))
        >>> job = registry.get("weekly-report")
    """

    def __init__(self) -> None:
        self._jobs: dict[str, RoutineJob] = {}
        self._lock = threading.RLock()

    def add(self, job: RoutineJob) -> None:
        """
        Register a job (thread-safe).

        Raises:
            JobAlreadyExistsError: If a job with the same name is registered
        """
        with self._lock:
            if job.name in self._jobs:
                raise JobAlreadyExistsError(f"Routine job '{job.name}' is already registered")
            self._jobs[job.name] = job

    def get(self, name: str) -> RoutineJob:
        """
        Get a registered job (thread-safe).

        Raises:
            JobNotFoundError: If no job has that name
        """
        with self._lock:
            job = self._jobs.get(name)
        if job is None:
            raise JobNotFoundError(f"Routine job '{name}' not found")
        return job

    def remove(self, name: str) -> RoutineJob:
        """
        Unregister a job (thread-safe).

        Raises:
            JobNotFoundError: If no job has that name
        """
        with self._lock:
            job = self._jobs.pop(name, None)
        if job is None:
            raise JobNotFoundError(f"Routine job '{name}' not found")
        return job

    def snapshot(self) -> list[RoutineJob]:
        """Copy of the registered jobs, safe to iterate while others register."""
        with self._lock:
            return list(self._jobs.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._jobs
