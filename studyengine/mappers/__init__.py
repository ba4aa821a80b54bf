"""Wire mappers for schedule and study plan records."""

from studyengine.mappers.plan_mapper import (
    decode_study_plans,
    recurrence_rule_from_dto,
    recurrence_rule_request_to_dto,
    study_plan_from_dto,
    study_plan_request_to_dto,
)
from studyengine.mappers.schedule_mapper import (
    availability_from_dto,
    availability_request_to_dto,
    context_from_dto,
    context_request_to_dto,
    decode_availabilities,
    decode_contexts,
    decode_overrides,
    override_from_dto,
    override_request_to_dto,
)

__all__ = [
    "availability_from_dto",
    "availability_request_to_dto",
    "context_from_dto",
    "context_request_to_dto",
    "decode_availabilities",
    "decode_contexts",
    "decode_overrides",
    "decode_study_plans",
    "override_from_dto",
    "override_request_to_dto",
    "recurrence_rule_from_dto",
    "recurrence_rule_request_to_dto",
    "study_plan_from_dto",
    "study_plan_request_to_dto",
]
