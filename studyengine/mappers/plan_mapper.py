"""Study plan mappers: wire DTOs <-> plan domain models.

Unknown status/type strings and out-of-range days are decode failures,
not silent defaults.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from studyengine.mappers.decoding import decode_all, require_value
from studyengine.mappers.dto import (
    CreateRecurrenceRuleRequestDto,
    CreateStudyPlanRequestDto,
    RecurrenceRuleDto,
    StudyPlanDto,
)
from studyengine.plans.types import (
    CreateRecurrenceRuleRequest,
    CreateStudyPlanRequest,
    RecurrenceRule,
    RecurrenceType,
    StudyPlan,
    StudyPlanStatus,
)
from studyengine.schedule.day_of_week import to_iso, to_remote
from studyengine.schedule.errors import MappingFailure
from studyengine.schedule.temporal import format_date, parse_date


def recurrence_rule_from_dto(dto: RecurrenceRuleDto) -> RecurrenceRule | MappingFailure:
    """Decode a recurrence rule; daysOfWeek arrive as 0=Sunday."""
    try:
        return RecurrenceRule(
            id=dto.id,
            study_plan_id=dto.study_plan_id,
            type=RecurrenceType.from_string(dto.type),
            interval=dto.interval,
            days_of_week=frozenset(require_value(to_iso(day), "daysOfWeek") for day in dto.days_of_week),
        )
    except (ValidationError, ValueError) as e:
        return MappingFailure(record_type="recurrence_rule", record_id=dto.id, reason=str(e))


def study_plan_from_dto(dto: StudyPlanDto) -> StudyPlan | MappingFailure:
    """Decode a study plan together with its optional recurrence rule.

    A corrupt recurrence rule fails the whole plan: dropping the rule would
    silently turn a scheduled plan into an ad hoc one.
    """
    rule: RecurrenceRule | None = None
    if dto.recurrence_rule is not None:
        decoded_rule = recurrence_rule_from_dto(dto.recurrence_rule)
        if isinstance(decoded_rule, MappingFailure):
            return MappingFailure(
                record_type="study_plan",
                record_id=dto.id,
                reason=f"recurrenceRule: {decoded_rule.reason}",
            )
        rule = decoded_rule

    try:
        return StudyPlan(
            id=dto.id,
            book_id=dto.book_id,
            start_date=require_value(parse_date(dto.start_date), "startDate"),
            end_date=require_value(parse_date(dto.end_date), "endDate"),
            status=StudyPlanStatus.from_string(dto.status),
            recurrence_rule=rule,
        )
    except (ValidationError, ValueError) as e:
        return MappingFailure(record_type="study_plan", record_id=dto.id, reason=str(e))


def decode_study_plans(payloads: Iterable[Mapping[str, Any]]) -> list[StudyPlan]:
    """Decode a list of study plan payloads, skipping corrupt records."""
    return decode_all(payloads, StudyPlanDto, study_plan_from_dto, "study_plan")


def recurrence_rule_request_to_dto(request: CreateRecurrenceRuleRequest) -> CreateRecurrenceRuleRequestDto:
    days = None
    if request.days_of_week is not None:
        days = sorted(require_value(to_remote(day), "daysOfWeek") for day in request.days_of_week)
    return CreateRecurrenceRuleRequestDto(
        type=request.type.value,
        interval=request.interval,
        days_of_week=days,
    )


def study_plan_request_to_dto(request: CreateStudyPlanRequest) -> CreateStudyPlanRequestDto:
    """Encode a create-plan request (PascalCase keys on the wire)."""
    return CreateStudyPlanRequestDto(
        start_date=format_date(request.start_date),
        end_date=format_date(request.end_date),
        recurrence_rule=(
            recurrence_rule_request_to_dto(request.recurrence_rule) if request.recurrence_rule is not None else None
        ),
    )
