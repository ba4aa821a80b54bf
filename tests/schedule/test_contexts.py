"""Tests for schedule context selection."""

from datetime import date

import pytest
from pydantic import ValidationError

from studyengine.schedule.contexts import active_context, active_multiplier
from studyengine.schedule.types import ScheduleContext


def _context(context_id: str, start: date, end: date, multiplier: float, context_type: str = "exam") -> ScheduleContext:
    return ScheduleContext(
        id=context_id,
        user_id="user1",
        context_type=context_type,
        start_date=start,
        end_date=end,
        load_multiplier=multiplier,
    )


@pytest.fixture
def vacation():
    return _context("a", date(2024, 1, 1), date(2024, 1, 31), 0.5, "vacation")


@pytest.fixture
def exam_period():
    return _context("b", date(2024, 1, 10), date(2024, 1, 20), 2.0, "exam_period")


def test_no_context_defaults_to_one():
    assert active_multiplier(date(2024, 1, 15), []) == 1.0
    assert active_context(date(2024, 1, 15), []) is None


def test_single_context(vacation):
    assert active_multiplier(date(2024, 1, 5), [vacation]) == 0.5


def test_range_is_inclusive(vacation):
    assert active_multiplier(date(2024, 1, 1), [vacation]) == 0.5
    assert active_multiplier(date(2024, 1, 31), [vacation]) == 0.5
    assert active_multiplier(date(2024, 2, 1), [vacation]) == 1.0
    assert active_multiplier(date(2023, 12, 31), [vacation]) == 1.0


def test_later_start_wins_on_overlap(vacation, exam_period):
    """Test that a period declared inside a broader one overrides it."""
    assert active_multiplier(date(2024, 1, 15), [vacation, exam_period]) == 2.0
    # Order of input must not matter
    assert active_multiplier(date(2024, 1, 15), [exam_period, vacation]) == 2.0


def test_outer_context_applies_outside_inner(vacation, exam_period):
    assert active_multiplier(date(2024, 1, 25), [vacation, exam_period]) == 0.5


def test_equal_start_dates_break_tie_on_id():
    first = _context("ctx-1", date(2024, 1, 1), date(2024, 1, 31), 0.5)
    second = _context("ctx-2", date(2024, 1, 1), date(2024, 1, 10), 1.5)
    assert active_context(date(2024, 1, 5), [second, first]) == second
    assert active_context(date(2024, 1, 5), [first, second]) == second


def test_zero_multiplier_is_allowed():
    rest = _context("rest", date(2024, 1, 1), date(2024, 1, 7), 0.0)
    assert active_multiplier(date(2024, 1, 3), [rest]) == 0.0


def test_negative_multiplier_rejected():
    with pytest.raises(ValidationError):
        _context("bad", date(2024, 1, 1), date(2024, 1, 7), -0.5)


def test_inverted_range_rejected():
    with pytest.raises(ValidationError, match="end_date"):
        _context("bad", date(2024, 1, 7), date(2024, 1, 1), 1.0)


def test_overlap_is_logged_as_warning(vacation, exam_period, loguru_messages):
    active_context(date(2024, 1, 15), [vacation, exam_period])
    warnings = [m for m in loguru_messages if m["level"] == "WARNING"]
    assert len(warnings) == 1
    assert warnings[0]["message"] == "Overlapping schedule contexts"
    assert warnings[0]["extra"]["context_ids"] == ["a", "b"]


def test_single_covering_context_logs_nothing(vacation, exam_period, loguru_messages):
    active_context(date(2024, 1, 25), [vacation, exam_period])
    assert not [m for m in loguru_messages if m["level"] == "WARNING"]
