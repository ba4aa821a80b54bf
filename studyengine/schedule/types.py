"""Schedule domain models.

Snapshots of user-owned schedule configuration, already decoded from the
wire. The resolver reads these and never mutates them.
"""

from datetime import date, datetime, time
from datetime import date as date_type
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from studyengine.schedule.constants import DEFAULT_LOAD_MULTIPLIER
from studyengine.schedule.day_of_week import IsoDay

EffectiveDaySource = Literal[
    "override_off",
    "override_window",
    "invalid_override",
    "weekly",
    "no_availability",
]


def _minutes_between(start: time, end: time) -> int:
    return int(
        (datetime.combine(date.min, end) - datetime.combine(date.min, start)).total_seconds() // 60
    )


def _require_ordered_window(start: time | None, end: time | None) -> None:
    if start is not None and end is not None and end < start:
        raise ValueError(f"end_time ({end}) must be >= start_time ({start})")


class TimeRange(BaseModel):
    """Study window within a single day."""

    model_config = ConfigDict(frozen=True)

    start_time: time
    end_time: time

    @model_validator(mode="after")
    def _check_window(self) -> "TimeRange":
        _require_ordered_window(self.start_time, self.end_time)
        return self

    @property
    def duration_minutes(self) -> int:
        return _minutes_between(self.start_time, self.end_time)


class WeeklyAvailability(BaseModel):
    """Recurring weekly availability window.

    Attributes:
        id: Record id
        user_id: Owning user
        day_of_week: ISO day (1=Monday ... 7=Sunday)
        start_time: Window start (local wall clock)
        end_time: Window end (local wall clock)
        is_active: Deactivated rows are kept but ignored by the resolver
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    day_of_week: IsoDay
    start_time: time
    end_time: time
    is_active: bool = True

    @model_validator(mode="after")
    def _check_window(self) -> "WeeklyAvailability":
        _require_ordered_window(self.start_time, self.end_time)
        return self

    @property
    def duration_minutes(self) -> int:
        return _minutes_between(self.start_time, self.end_time)

    @property
    def window(self) -> TimeRange:
        return TimeRange(start_time=self.start_time, end_time=self.end_time)


class ScheduleOverride(BaseModel):
    """Date-specific override of the weekly pattern.

    is_off=True means no availability regardless of times.
    is_off=False with both times present replaces the weekly window.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    date: date_type
    start_time: time | None = None
    end_time: time | None = None
    is_off: bool = False

    @model_validator(mode="after")
    def _check_window(self) -> "ScheduleOverride":
        _require_ordered_window(self.start_time, self.end_time)
        return self

    @property
    def is_custom_hours(self) -> bool:
        return not self.is_off and self.start_time is not None and self.end_time is not None


class ScheduleContext(BaseModel):
    """Named period (exam period, vacation, ...) that scales study load.

    Attributes:
        id: Record id
        user_id: Owning user
        context_type: Free-text label chosen by the user
        start_date: First day covered
        end_date: Last day covered (inclusive)
        load_multiplier: Scale for planned work; 0 means no study expected
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    context_type: str
    start_date: date
    end_date: date
    load_multiplier: float = Field(default=DEFAULT_LOAD_MULTIPLIER, ge=0.0)

    @model_validator(mode="after")
    def _check_range(self) -> "ScheduleContext":
        if self.end_date < self.start_date:
            raise ValueError(f"end_date ({self.end_date}) must be >= start_date ({self.start_date})")
        return self

    def covers(self, target_date: date) -> bool:
        return self.start_date <= target_date <= self.end_date


class EffectiveDay(BaseModel):
    """Resolved outcome for one concrete date.

    Attributes:
        date: Date that was resolved
        available: Whether any study window applies
        window: Study window when available
        load_multiplier: Intensity scale from the active context (1.0 if none)
        source: Which rule decided availability
    """

    model_config = ConfigDict(frozen=True)

    date: date_type
    available: bool
    window: TimeRange | None = None
    load_multiplier: float = DEFAULT_LOAD_MULTIPLIER
    source: EffectiveDaySource

    @property
    def is_study_expected(self) -> bool:
        return self.available and self.load_multiplier > 0


class CreateAvailabilityRequest(BaseModel):
    """User request to add a weekly availability window."""

    day_of_week: IsoDay
    start_time: time
    end_time: time

    @model_validator(mode="after")
    def _check_window(self) -> "CreateAvailabilityRequest":
        _require_ordered_window(self.start_time, self.end_time)
        return self


class CreateOverrideRequest(BaseModel):
    """User request to override one date."""

    date: date_type
    start_time: time | None = None
    end_time: time | None = None
    is_off: bool = False

    @model_validator(mode="after")
    def _check_window(self) -> "CreateOverrideRequest":
        _require_ordered_window(self.start_time, self.end_time)
        return self


class CreateContextRequest(BaseModel):
    """User request to declare a schedule context."""

    context_type: str
    start_date: date
    end_date: date
    load_multiplier: float = Field(default=DEFAULT_LOAD_MULTIPLIER, ge=0.0)

    @model_validator(mode="after")
    def _check_range(self) -> "CreateContextRequest":
        if self.end_date < self.start_date:
            raise ValueError(f"end_date ({self.end_date}) must be >= start_date ({self.start_date})")
        return self
