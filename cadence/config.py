"""Scheduler configuration, validated with Pydantic."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cadence.utils.time import get_timezone

ENVIRONMENT_VAR = "AGENT_ENVIRONMENT"
POLLING_INTERVAL_VAR = "CADENCE_POLLING_INTERVAL_SECONDS"
TIMEZONE_VAR = "CADENCE_TIMEZONE"


class SchedulerSettings(BaseModel):
    """
    Settings for a RoutineScheduler.

    ``environment`` only gates whether job bodies run; it never changes which
    polls fire.
    """

    model_config = ConfigDict(frozen=True)

    environment: str = "unknown"
    production_environments: frozenset[str] = Field(
        default_factory=lambda: frozenset({"production"})
    )
    polling_interval_seconds: float = Field(default=60.0, gt=0)
    timezone: str | None = None
    verbose: bool = False

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value is not None:
            get_timezone(value)
        return value

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: object
    ) -> SchedulerSettings:
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Explicit values that win over the environment

        Returns:
            Validated settings
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if env.get(ENVIRONMENT_VAR):
            values["environment"] = env[ENVIRONMENT_VAR]
        if env.get(POLLING_INTERVAL_VAR):
            values["polling_interval_seconds"] = env[POLLING_INTERVAL_VAR]
        if env.get(TIMEZONE_VAR):
            values["timezone"] = env[TIMEZONE_VAR]

        values.update(overrides)
        return cls(**values)

    def is_production_like(self) -> bool:
        return self.environment in self.production_environments
