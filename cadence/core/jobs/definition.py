"""Routine job definition records."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RoutineJobDefinition(BaseModel):
    """
    Declarative routine job, as stored by an admin UI or a database row.

    Accepts either ``cron_expression`` or the camelCase ``cronExpression`` key;
    unrelated keys (ids, timestamps) are ignored. The expression is parsed when
    the job is registered, not here.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str = Field(min_length=1)
    cron_expression: str = Field(alias="cronExpression")
    enabled: bool = True

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Job name must not be blank")
        return value
