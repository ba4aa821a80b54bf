"""Wire DTOs for the remote study-planning API.

Field names mirror the remote JSON keys (camelCase for reads, PascalCase
for plan-creation requests). Values stay in their wire encoding:
- dayOfWeek / daysOfWeek: origin-zero, Sunday-first (0..6)
- dates: "YYYY-MM-DD"
- times: "HH:MM[:SS]"
Decoding is the mappers' job, not the DTOs'.
"""

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# Schedule


class UserAvailabilityDto(WireModel):
    id: str
    user_id: str = Field(alias="userId")
    day_of_week: int = Field(alias="dayOfWeek")
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    is_active: bool = Field(alias="isActive")


class CreateUserAvailabilityRequestDto(WireModel):
    day_of_week: int = Field(alias="dayOfWeek")
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")


class ScheduleOverrideDto(WireModel):
    id: str
    user_id: str = Field(alias="userId")
    override_date: str = Field(alias="overrideDate")
    start_time: str | None = Field(default=None, alias="startTime")
    end_time: str | None = Field(default=None, alias="endTime")
    is_off: bool = Field(alias="isOff")


class CreateScheduleOverrideRequestDto(WireModel):
    override_date: str = Field(alias="overrideDate")
    start_time: str | None = Field(default=None, alias="startTime")
    end_time: str | None = Field(default=None, alias="endTime")
    is_off: bool = Field(alias="isOff")


class ScheduleContextDto(WireModel):
    id: str
    user_id: str = Field(alias="userId")
    context_type: str = Field(alias="contextType")
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    load_multiplier: float = Field(alias="loadMultiplier")


class CreateScheduleContextRequestDto(WireModel):
    context_type: str = Field(alias="contextType")
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    load_multiplier: float = Field(default=1.0, alias="loadMultiplier")


# Study plans


class RecurrenceRuleDto(WireModel):
    id: str
    study_plan_id: str = Field(alias="studyPlanId")
    type: str
    interval: int
    days_of_week: list[int] = Field(default_factory=list, alias="daysOfWeek")


class StudyPlanDto(WireModel):
    id: str
    book_id: str = Field(alias="bookId")
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    status: str
    recurrence_rule: RecurrenceRuleDto | None = Field(default=None, alias="recurrenceRule")


class CreateRecurrenceRuleRequestDto(WireModel):
    type: str = Field(alias="Type")
    interval: int = Field(default=1, alias="Interval")
    days_of_week: list[int] | None = Field(default=None, alias="DaysOfWeek")


class CreateStudyPlanRequestDto(WireModel):
    start_date: str = Field(alias="StartDate")
    end_date: str = Field(alias="EndDate")
    recurrence_rule: CreateRecurrenceRuleRequestDto | None = Field(default=None, alias="RecurrenceRule")
