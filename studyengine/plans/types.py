"""Study plan and recurrence rule models."""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from studyengine.schedule.day_of_week import IsoDay


class StudyPlanStatus(StrEnum):
    ACTIVE = "Active"
    PAUSED = "Paused"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def from_string(cls, value: str) -> "StudyPlanStatus":
        """Parse a status case-insensitively.

        Raises:
            ValueError: If value names no known status
        """
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown study plan status: {value!r}")


class RecurrenceType(StrEnum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    CUSTOM = "Custom"

    @classmethod
    def from_string(cls, value: str) -> "RecurrenceType":
        """Parse a recurrence type case-insensitively.

        Raises:
            ValueError: If value names no known type
        """
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown recurrence type: {value!r}")


class RecurrenceRule(BaseModel):
    """Recurrence rule attached to a study plan.

    Daily ignores days_of_week. Weekly/Custom repeat every `interval` weeks
    on the listed ISO days and require at least one day.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    study_plan_id: str
    type: RecurrenceType
    interval: int = Field(default=1, ge=1)
    days_of_week: frozenset[IsoDay] = frozenset()

    @model_validator(mode="after")
    def _check_days(self) -> "RecurrenceRule":
        if self.type != RecurrenceType.DAILY and not self.days_of_week:
            raise ValueError(f"{self.type.value} recurrence requires at least one day of week")
        return self


class StudyPlan(BaseModel):
    """Study plan for one book over a date range.

    A plan without a recurrence rule is ad hoc and has no computed due dates.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    book_id: str
    start_date: date
    end_date: date
    status: StudyPlanStatus = StudyPlanStatus.ACTIVE
    recurrence_rule: RecurrenceRule | None = None

    @model_validator(mode="after")
    def _check_range(self) -> "StudyPlan":
        if self.end_date < self.start_date:
            raise ValueError(f"end_date ({self.end_date}) must be >= start_date ({self.start_date})")
        return self

    @property
    def is_active(self) -> bool:
        return self.status == StudyPlanStatus.ACTIVE


class CreateRecurrenceRuleRequest(BaseModel):
    type: RecurrenceType
    interval: int = Field(default=1, ge=1)
    days_of_week: list[IsoDay] | None = None


class CreateStudyPlanRequest(BaseModel):
    start_date: date
    end_date: date
    recurrence_rule: CreateRecurrenceRuleRequest | None = None

    @model_validator(mode="after")
    def _check_range(self) -> "CreateStudyPlanRequest":
        if self.end_date < self.start_date:
            raise ValueError(f"end_date ({self.end_date}) must be >= start_date ({self.start_date})")
        return self
