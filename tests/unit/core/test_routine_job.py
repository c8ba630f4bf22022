"""Unit tests for RoutineJob and RoutineJobDefinition."""

from datetime import timedelta

import pytest
from conftest import dt
from pydantic import ValidationError

from cadence.core.common.exceptions import MalformedScheduleError
from cadence.core.jobs import RoutineJob, RoutineJobDefinition


class TestRoutineJob:
    def test_parses_schedule_on_construction(self):
        job = RoutineJob("weekly-report", "0 9 * * 1")
        assert job.name == "weekly-report"
        assert job.cron_expression == "0 9 * * 1"
        assert job.schedule.day_of_week.value == 1
        assert job.enabled is True
        assert job.last_fired_at is None

    def test_malformed_expression_names_the_job(self):
        with pytest.raises(MalformedScheduleError) as exc_info:
            RoutineJob("weekly-report", "0 9 * *")

        error = exc_info.value
        assert error.job_name == "weekly-report"
        assert error.field_count == 4
        assert "weekly-report" in str(error)
        assert "0 9 * *" in str(error)

    def test_should_run_fires_once(self):
        job = RoutineJob("weekly-report", "0 9 * * 1")
        now = dt(2025, 6, 16, 9, 0)

        assert job.should_run(now) is True
        assert job.should_run(now + timedelta(seconds=30)) is False
        assert job.last_fired_at == now

    def test_disabled_job_never_fires(self):
        job = RoutineJob("weekly-report", "0 9 * * 1", enabled=False)
        assert job.should_run(dt(2025, 6, 16, 9, 0)) is False
        assert job.last_fired_at is None

    def test_reenabled_job_fires(self):
        job = RoutineJob("weekly-report", "0 9 * * 1", enabled=False)
        job.enabled = True
        assert job.should_run(dt(2025, 6, 16, 9, 0)) is True


class TestReschedule:
    def test_reschedule_replaces_schedule(self):
        job = RoutineJob("report", "0 9 * * 1")
        job.reschedule("30 10 * * 2")

        assert job.cron_expression == "30 10 * * 2"
        assert job.should_run(dt(2025, 6, 17, 10, 30))

    def test_reschedule_keeps_last_fired_at(self):
        job = RoutineJob("report", "* * * * *")
        fired_at = dt(2025, 6, 16, 9, 0)
        job.should_run(fired_at)

        job.reschedule("* 9 * * *")

        assert job.last_fired_at == fired_at
        assert job.should_run(fired_at + timedelta(seconds=30)) is False

    def test_malformed_reschedule_keeps_old_schedule(self):
        job = RoutineJob("report", "0 9 * * 1")

        with pytest.raises(MalformedScheduleError):
            job.reschedule("0 9")

        assert job.cron_expression == "0 9 * * 1"


class TestNextRunTime:
    def test_next_run_time(self):
        job = RoutineJob("report", "0 9 * * 1")
        assert job.next_run_time(dt(2025, 6, 16, 9, 0)) == dt(2025, 6, 23, 9, 0)

    def test_disabled_has_no_next_run_time(self):
        job = RoutineJob("report", "0 9 * * 1", enabled=False)
        assert job.next_run_time(dt(2025, 6, 16)) is None


class TestRoutineJobDefinition:
    def test_accepts_snake_case(self):
        definition = RoutineJobDefinition(name="report", cron_expression="0 9 * * 1")
        assert definition.cron_expression == "0 9 * * 1"
        assert definition.enabled is True

    def test_accepts_database_row(self):
        row = {
            "id": "3f6c",
            "name": "  report  ",
            "cronExpression": "0 9 * * 1",
            "enabled": False,
            "createdAt": "2025-06-01T00:00:00Z",
        }
        definition = RoutineJobDefinition.model_validate(row)

        assert definition.name == "report"
        assert definition.cron_expression == "0 9 * * 1"
        assert definition.enabled is False

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            RoutineJobDefinition(name=name, cron_expression="* * * * *")

    def test_missing_expression_rejected(self):
        with pytest.raises(ValidationError, match="cronExpression"):
            RoutineJobDefinition.model_validate({"name": "report"})

    def test_definition_does_not_parse_expression(self):
        definition = RoutineJobDefinition(name="report", cron_expression="0 9")
        assert definition.cron_expression == "0 9"
