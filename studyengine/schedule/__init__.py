"""Schedule module - time normalization and per-date availability.

This module provides:
- Day-of-week conversion between the wire (0=Sunday) and ISO (7=Sunday)
- Date/time parsing with explicit failure values
- Per-date availability resolution from weekly rows, overrides and contexts
"""

from studyengine.schedule.availability import resolve, select_override, select_weekly_window
from studyengine.schedule.contexts import active_context, active_multiplier
from studyengine.schedule.day_of_week import IsoDay, iso_day_of, to_iso, to_remote
from studyengine.schedule.errors import InvalidDayOfWeek, InvalidDayOfWeekError, MappingFailure, ParseFailure
from studyengine.schedule.temporal import (
    format_date,
    format_time_of_day,
    parse_date,
    parse_instant,
    parse_time_of_day,
)
from studyengine.schedule.types import (
    EffectiveDay,
    ScheduleContext,
    ScheduleOverride,
    TimeRange,
    WeeklyAvailability,
)

__all__ = [
    "EffectiveDay",
    "InvalidDayOfWeek",
    "InvalidDayOfWeekError",
    "IsoDay",
    "MappingFailure",
    "ParseFailure",
    "ScheduleContext",
    "ScheduleOverride",
    "TimeRange",
    "WeeklyAvailability",
    "active_context",
    "active_multiplier",
    "format_date",
    "format_time_of_day",
    "iso_day_of",
    "parse_date",
    "parse_instant",
    "parse_time_of_day",
    "resolve",
    "select_override",
    "select_weekly_window",
    "to_iso",
    "to_remote",
]
