"""
Unit tests for the Time value object.
"""

import datetime

import pytest

from clinic_core.domain.exceptions import ValidationError
from clinic_core.domain.value_objects import Time


class TestTime:
    """Tests for Time."""

    @pytest.mark.parametrize("value", ["00:00", "09:30", "23:59", "14:30:45"])
    def test_valid_values(self, value):
        assert Time.is_valid(value)

    @pytest.mark.parametrize("value", ["24:00", "9:30", "12:60", "noon", "", None, 930])
    def test_invalid_values(self, value):
        assert not Time.is_valid(value)

    def test_seconds_are_dropped(self):
        assert str(Time("14:30:45")) == "14:30"

    def test_invalid_time_raises(self):
        with pytest.raises(ValidationError):
            Time("25:00")

    def test_create_returns_none_for_empty(self):
        assert Time.create("") is None
        assert Time.create(None) is None

    def test_components(self):
        time = Time("08:05")

        assert time.hours == 8
        assert time.minutes == 5
        assert time.to_time() == datetime.time(8, 5)

    def test_ordering(self):
        assert Time("08:00").is_before(Time("08:01"))
        assert Time("18:00").is_after(Time("08:00"))
        assert not Time("08:00").is_before(Time("08:00"))
