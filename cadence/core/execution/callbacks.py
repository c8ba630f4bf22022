"""Protocols for the collaborator that runs due jobs."""

from typing import Any, Protocol


class DueJobHandler(Protocol):
    """
    Receives due jobs from the scheduler.

    ``on_due`` is called synchronously from inside a poll, once per fire. The
    scheduler does not wait for the job body, retry it, or record its outcome.
    """

    def on_due(self, job_name: str) -> Any:
        """
        Handle a due job.

        Args:
            job_name: Name of the job that fired
        """
        ...
