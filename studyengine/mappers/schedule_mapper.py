"""Schedule mappers: wire DTOs <-> schedule domain models.

Decoders return the domain model or a MappingFailure. A corrupt record
(invalid day of week, unparseable date/time, broken invariant) is never
replaced with a default value; batch decoders skip it with a warning.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from studyengine.mappers.decoding import decode_all, require_value
from studyengine.mappers.dto import (
    CreateScheduleContextRequestDto,
    CreateScheduleOverrideRequestDto,
    CreateUserAvailabilityRequestDto,
    ScheduleContextDto,
    ScheduleOverrideDto,
    UserAvailabilityDto,
)
from studyengine.schedule.day_of_week import to_iso, to_remote
from studyengine.schedule.errors import MappingFailure
from studyengine.schedule.temporal import format_date, format_time_of_day, parse_date, parse_time_of_day
from studyengine.schedule.types import (
    CreateAvailabilityRequest,
    CreateContextRequest,
    CreateOverrideRequest,
    ScheduleContext,
    ScheduleOverride,
    WeeklyAvailability,
)


def availability_from_dto(dto: UserAvailabilityDto) -> WeeklyAvailability | MappingFailure:
    """Decode a weekly availability row.

    Args:
        dto: Wire record (dayOfWeek is 0=Sunday)

    Returns:
        WeeklyAvailability with an ISO day, or MappingFailure
    """
    try:
        return WeeklyAvailability(
            id=dto.id,
            user_id=dto.user_id,
            day_of_week=require_value(to_iso(dto.day_of_week), "dayOfWeek"),
            start_time=require_value(parse_time_of_day(dto.start_time), "startTime"),
            end_time=require_value(parse_time_of_day(dto.end_time), "endTime"),
            is_active=dto.is_active,
        )
    except (ValidationError, ValueError) as e:
        return MappingFailure(record_type="availability", record_id=dto.id, reason=str(e))


def override_from_dto(dto: ScheduleOverrideDto) -> ScheduleOverride | MappingFailure:
    """Decode a schedule override.

    Missing times are kept as None; the resolver decides what a
    non-off override without times means.
    """
    try:
        return ScheduleOverride(
            id=dto.id,
            user_id=dto.user_id,
            date=require_value(parse_date(dto.override_date), "overrideDate"),
            start_time=(
                require_value(parse_time_of_day(dto.start_time), "startTime") if dto.start_time is not None else None
            ),
            end_time=(
                require_value(parse_time_of_day(dto.end_time), "endTime") if dto.end_time is not None else None
            ),
            is_off=dto.is_off,
        )
    except (ValidationError, ValueError) as e:
        return MappingFailure(record_type="override", record_id=dto.id, reason=str(e))


def context_from_dto(dto: ScheduleContextDto) -> ScheduleContext | MappingFailure:
    """Decode a schedule context (rejects negative multipliers and inverted ranges)."""
    try:
        return ScheduleContext(
            id=dto.id,
            user_id=dto.user_id,
            context_type=dto.context_type,
            start_date=require_value(parse_date(dto.start_date), "startDate"),
            end_date=require_value(parse_date(dto.end_date), "endDate"),
            load_multiplier=dto.load_multiplier,
        )
    except (ValidationError, ValueError) as e:
        return MappingFailure(record_type="context", record_id=dto.id, reason=str(e))


def decode_availabilities(payloads: Iterable[Mapping[str, Any]]) -> list[WeeklyAvailability]:
    """Decode a list of availability payloads, skipping corrupt records."""
    return decode_all(payloads, UserAvailabilityDto, availability_from_dto, "availability")


def decode_overrides(payloads: Iterable[Mapping[str, Any]]) -> list[ScheduleOverride]:
    """Decode a list of override payloads, skipping corrupt records."""
    return decode_all(payloads, ScheduleOverrideDto, override_from_dto, "override")


def decode_contexts(payloads: Iterable[Mapping[str, Any]]) -> list[ScheduleContext]:
    """Decode a list of context payloads, skipping corrupt records."""
    return decode_all(payloads, ScheduleContextDto, context_from_dto, "context")


def availability_request_to_dto(request: CreateAvailabilityRequest) -> CreateUserAvailabilityRequestDto:
    """Encode a create-availability request; the day goes out as 0=Sunday."""
    dto = CreateUserAvailabilityRequestDto(
        day_of_week=require_value(to_remote(request.day_of_week), "dayOfWeek"),
        start_time=format_time_of_day(request.start_time),
        end_time=format_time_of_day(request.end_time),
    )
    logger.debug("Encoded availability request", day_of_week=dto.day_of_week)
    return dto


def override_request_to_dto(request: CreateOverrideRequest) -> CreateScheduleOverrideRequestDto:
    return CreateScheduleOverrideRequestDto(
        override_date=format_date(request.date),
        start_time=format_time_of_day(request.start_time) if request.start_time is not None else None,
        end_time=format_time_of_day(request.end_time) if request.end_time is not None else None,
        is_off=request.is_off,
    )


def context_request_to_dto(request: CreateContextRequest) -> CreateScheduleContextRequestDto:
    return CreateScheduleContextRequestDto(
        context_type=request.context_type,
        start_date=format_date(request.start_date),
        end_date=format_date(request.end_date),
        load_multiplier=request.load_multiplier,
    )
