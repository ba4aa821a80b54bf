"""Study calendar composition.

Walks a plan's due dates and resolves each against the user's schedule.
This is where status gating lives: only Active plans with a recurrence
rule produce days.
"""

from collections.abc import Iterator, Sequence
from datetime import date as date_type

from loguru import logger
from pydantic import BaseModel, ConfigDict

from studyengine.plans.recurrence import due_dates
from studyengine.plans.types import StudyPlan
from studyengine.schedule.availability import resolve
from studyengine.schedule.types import (
    EffectiveDay,
    ScheduleContext,
    ScheduleOverride,
    WeeklyAvailability,
)


class StudyDay(BaseModel):
    """A due date paired with its resolved availability."""

    model_config = ConfigDict(frozen=True)

    date: date_type
    effective: EffectiveDay


def study_days(
    plan: StudyPlan,
    weekly_availabilities: Sequence[WeeklyAvailability],
    overrides: Sequence[ScheduleOverride],
    contexts: Sequence[ScheduleContext],
) -> Iterator[StudyDay]:
    """Yield every due date of an Active plan with its effective day.

    Unavailable due dates are yielded too (effective.available is False)
    so the caller can decide whether to skip or reschedule them.

    Args:
        plan: Study plan
        weekly_availabilities: Snapshot of weekly rows
        overrides: Snapshot of date overrides
        contexts: Snapshot of schedule contexts

    Returns:
        Iterator of StudyDay, empty for non-Active or ad hoc plans
    """
    if not plan.is_active:
        logger.debug("Skipping non-active plan", plan_id=plan.id, status=plan.status.value)
        return
    if plan.recurrence_rule is None:
        logger.debug("Plan has no recurrence rule; no computed due dates", plan_id=plan.id)
        return

    for due in due_dates(plan, plan.recurrence_rule):
        yield StudyDay(
            date=due,
            effective=resolve(due, weekly_availabilities, overrides, contexts),
        )
