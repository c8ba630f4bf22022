"""Pure unit tests for time utilities."""

from datetime import datetime

import pytest

from cadence.utils.time import get_timezone, local_now, make_clock


class TestGetTimezoneErrorHandling:
    """Test get_timezone error handling."""

    def test_invalid_timezone_raises_valueerror(self):
        with pytest.raises(ValueError) as exc_info:
            get_timezone("Invalid/Nonexistent/Timezone")

        error_msg = str(exc_info.value)
        assert "Invalid timezone" in error_msg
        assert "Invalid/Nonexistent/Timezone" in error_msg

    def test_invalid_inputs_raise_valueerror(self):
        for invalid_name in ["", " ", "123", "UTC/Invalid"]:
            with pytest.raises(ValueError):
                get_timezone(invalid_name)

    def test_valid_timezone(self):
        assert str(get_timezone("Asia/Seoul")) == "Asia/Seoul"


class TestClocks:
    def test_local_now_is_timezone_aware(self):
        now = local_now()
        assert isinstance(now, datetime)
        assert now.tzinfo is not None

    def test_make_clock_without_timezone_is_local(self):
        assert make_clock(None) is local_now

    def test_make_clock_with_timezone(self):
        clock = make_clock("America/New_York")
        assert str(clock().tzinfo) == "America/New_York"

    def test_make_clock_invalid_timezone(self):
        with pytest.raises(ValueError):
            make_clock("Nowhere/Special")
