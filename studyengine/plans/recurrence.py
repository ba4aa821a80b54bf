"""Recurrence expansion for study plans.

Deterministic, stateless helpers. due_dates returns a fresh generator on
every call; nothing is cached between calls.

Status gating (only Active plans) is the caller's job, see plans.calendar.
"""

from collections.abc import Iterator
from datetime import date, timedelta

from studyengine.plans.types import RecurrenceRule, RecurrenceType, StudyPlan
from studyengine.schedule.day_of_week import iso_day_of


def start_of_week(target_date: date) -> date:
    """Get the Monday of target_date's ISO week."""
    return target_date - timedelta(days=target_date.isoweekday() - 1)


def week_offset(anchor: date, target_date: date) -> int:
    """Count whole ISO weeks between anchor's week and target_date's week.

    Args:
        anchor: Date whose week is week 0
        target_date: Date to measure

    Returns:
        Week index (negative if target_date's week precedes anchor's)
    """
    return (start_of_week(target_date) - start_of_week(anchor)).days // 7


def _daily(plan: StudyPlan, rule: RecurrenceRule) -> Iterator[date]:
    step = timedelta(days=rule.interval)
    current = plan.start_date
    while current <= plan.end_date:
        yield current
        current += step


def _weekly(plan: StudyPlan, rule: RecurrenceRule) -> Iterator[date]:
    current = plan.start_date
    while current <= plan.end_date:
        if iso_day_of(current) in rule.days_of_week and week_offset(plan.start_date, current) % rule.interval == 0:
            yield current
        current += timedelta(days=1)


def due_dates(plan: StudyPlan, rule: RecurrenceRule) -> Iterator[date]:
    """Lazily enumerate the dates on which a study session is due.

    Rules:
    - Daily: every `interval` days from start_date
    - Weekly/Custom: listed ISO days in weeks whose offset from
      start_date's week (Monday-based) is a multiple of `interval`

    Args:
        plan: Study plan providing the inclusive [start_date, end_date] range
        rule: Recurrence rule to expand

    Returns:
        Iterator of due dates in ascending order, bounded by the plan range
    """
    if rule.type == RecurrenceType.DAILY:
        return _daily(plan, rule)
    return _weekly(plan, rule)
