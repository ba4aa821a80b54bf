"""Tests for temporal parsing.

Tests enforce that:
- "Z", numeric-offset and naive encodings all parse
- Zoned values are converted to the target local zone
- Naive values are local wall-clock time unless UTC is requested explicitly
- Bad input yields ParseFailure, never the current time
"""

from datetime import date, datetime, time

import pytest

from studyengine.config.settings import settings
from studyengine.schedule.errors import ParseFailure
from studyengine.schedule.temporal import (
    format_date,
    format_time_of_day,
    parse_date,
    parse_instant,
    parse_time_of_day,
)


class TestParseInstant:
    """Tests for parse_instant priority order."""

    def test_utc_designator_converted_to_local(self, plus_two):
        result = parse_instant("2024-03-01T10:00:00Z", tz=plus_two)
        assert result == datetime(2024, 3, 1, 12, 0)
        assert result.tzinfo is None

    def test_positive_offset_converted_to_local(self, plus_two):
        result = parse_instant("2024-03-01T10:00:00+02:00", tz=plus_two)
        assert result == datetime(2024, 3, 1, 10, 0)

    def test_negative_offset_converted_to_local(self, plus_two):
        result = parse_instant("2024-03-01T10:00:00-05:00", tz=plus_two)
        assert result == datetime(2024, 3, 1, 17, 0)

    def test_naive_value_is_local_wall_clock(self, plus_two):
        """Test that an offset-less timestamp is not shifted."""
        result = parse_instant("2024-03-01T10:00:00", tz=plus_two)
        assert result == datetime(2024, 3, 1, 10, 0)

    def test_naive_value_as_utc_when_requested(self, plus_two):
        result = parse_instant("2024-03-01T10:00:00", tz=plus_two, assume_naive_utc=True)
        assert result == datetime(2024, 3, 1, 12, 0)

    def test_conversion_can_cross_midnight(self, plus_two):
        result = parse_instant("2024-02-29T23:30:00Z", tz=plus_two)
        assert result == datetime(2024, 3, 1, 1, 30)

    def test_long_fractional_seconds(self, plus_two):
        """Test seven-digit fractions as emitted by some backends."""
        result = parse_instant("2024-03-01T10:00:00.1234567Z", tz=plus_two)
        assert result == datetime(2024, 3, 1, 12, 0, 0, 123456)

    def test_surrounding_whitespace_ignored(self, plus_two):
        result = parse_instant("  2024-03-01T10:00:00Z ", tz=plus_two)
        assert result == datetime(2024, 3, 1, 12, 0)

    @pytest.mark.parametrize(
        "text",
        [
            "2024-03-01T10:00:00Z",
            "2024-03-01T10:00:00+02:00",
            "2024-03-01T10:00:00",
        ],
    )
    def test_all_supported_encodings_parse(self, text, plus_two):
        assert isinstance(parse_instant(text, tz=plus_two), datetime)

    @pytest.mark.parametrize(
        "text",
        [
            "not-a-date",
            "",
            "2024-03-01",
            "2024-13-01T10:00:00",
            "2024-03-01T25:00:00Z",
            "yesterday at noon",
        ],
    )
    def test_unparseable_returns_failure(self, text, plus_two):
        result = parse_instant(text, tz=plus_two)
        assert isinstance(result, ParseFailure)
        assert result.text == text

    @pytest.mark.parametrize(
        "text",
        [
            "2024-03-01T10:00:00+02:00Z",
            "2024-03-01T10:00:00ZZ",
        ],
    )
    def test_stacked_zone_designators_fail(self, text, plus_two):
        """Test that dropping the "Z" never turns a bad value into a naive local one."""
        result = parse_instant(text, tz=plus_two)
        assert isinstance(result, ParseFailure)
        assert result.reason == "unrecognized date-time encoding"

    def test_non_string_returns_failure(self):
        result = parse_instant(None)  # type: ignore[arg-type]
        assert isinstance(result, ParseFailure)
        assert result.reason == "not a string"

    def test_failure_is_logged(self, loguru_messages):
        parse_instant("not-a-date")
        warnings = [m for m in loguru_messages if m["level"] == "WARNING"]
        assert warnings
        assert warnings[0]["extra"]["text"] == "not-a-date"

    def test_default_zone_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "local_timezone", "Asia/Tokyo")
        result = parse_instant("2024-03-01T00:00:00Z")
        assert result == datetime(2024, 3, 1, 9, 0)


class TestParseTimeOfDay:
    """Tests for strict 24-hour time parsing."""

    def test_hours_and_minutes(self):
        assert parse_time_of_day("09:30") == time(9, 30)

    def test_hours_minutes_seconds(self):
        assert parse_time_of_day("21:05:59") == time(21, 5, 59)

    def test_midnight(self):
        assert parse_time_of_day("00:00") == time(0, 0)

    @pytest.mark.parametrize(
        "text",
        ["9:30", "24:00", "12:60", "12:00:60", "09:30 PM", "09:30:00.000", "0930", "", "noon"],
    )
    def test_other_shapes_fail(self, text):
        assert isinstance(parse_time_of_day(text), ParseFailure)


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("2024-01-31") == date(2024, 1, 31)

    @pytest.mark.parametrize("text", ["2024-02-30", "31/01/2024", "2024-1-5", "2024-01-31T00:00:00"])
    def test_invalid_dates_fail(self, text):
        assert isinstance(parse_date(text), ParseFailure)


def test_wire_formatting():
    assert format_time_of_day(time(9, 5)) == "09:05:00"
    assert format_date(date(2024, 1, 7)) == "2024-01-07"
