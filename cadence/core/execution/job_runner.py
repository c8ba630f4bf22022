"""Job body execution with environment gating."""

import asyncio
import inspect
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from cadence.config import SchedulerSettings
from cadence.utils.logging import ContextLogger, get_logger


class JobRunner:
    """
    Default DueJobHandler: runs registered job bodies.

    Outside production-like environments a due job is logged and skipped. The
    scheduler has already counted it as fired, so a skipped run is not retried
    within the same minute.
    """

    def __init__(
        self,
        settings: SchedulerSettings | None = None,
        executor: ThreadPoolExecutor | None = None,
        logger: ContextLogger | None = None,
    ) -> None:
        """
        Initialize job runner.

        Args:
            settings: Scheduler settings (environment gating)
            executor: Run bodies on this pool instead of inline (optional)
            logger: Custom logger (uses default if None)
        """
        self.settings = settings or SchedulerSettings.from_env()
        self.executor = executor
        self.logger = logger or get_logger()
        self._functions: dict[str, Callable[[], Any]] = {}
        self._lock = threading.RLock()

    def register_function(self, job_name: str, func: Callable[[], Any]) -> None:
        """Register the body to run when ``job_name`` is due."""
        with self._lock:
            self._functions[job_name] = func

    def unregister_function(self, job_name: str) -> bool:
        with self._lock:
            return self._functions.pop(job_name, None) is not None

    def has_function(self, job_name: str) -> bool:
        with self._lock:
            return job_name in self._functions

    def on_due(self, job_name: str) -> Future | None:
        """
        Run the body of a due job.

        Args:
            job_name: Name of the job that fired

        Returns:
            Future when the body was submitted to the executor, otherwise None
        """
        job_logger = self.logger.with_context(job_name=job_name)
        job_logger.info("Running routine job")

        if not self.settings.is_production_like():
            job_logger.info(
                "Skipping routine job - not in production environment",
                environment=self.settings.environment,
            )
            return None

        with self._lock:
            func = self._functions.get(job_name)

        if func is None:
            job_logger.info("No body registered for routine job; nothing to execute")
            return None

        if self.executor is not None:
            return self.executor.submit(self._execute, func, job_logger)

        self._execute(func, job_logger)
        return None

    def _execute(self, func: Callable[[], Any], job_logger: ContextLogger) -> None:
        try:
            if inspect.iscoroutinefunction(func):
                asyncio.run(func())
            else:
                func()
        except Exception as e:
            job_logger.error("Routine job failed", exc_info=True, error=str(e))
            return

        job_logger.debug("Routine job completed")
