"""Per-date availability resolution.

Combines, in order:
1. Date-specific override (greatest id wins on duplicates)
2. Weekly availability for the ISO day (earliest start wins on duplicates)
3. Active schedule context for the load multiplier

Pure read-side computation over snapshots passed by the caller.
"""

from collections.abc import Iterable
from datetime import date

from loguru import logger

from studyengine.schedule.contexts import active_multiplier
from studyengine.schedule.day_of_week import iso_day_of
from studyengine.schedule.types import (
    EffectiveDay,
    ScheduleContext,
    ScheduleOverride,
    TimeRange,
    WeeklyAvailability,
)


def select_override(target_date: date, overrides: Iterable[ScheduleOverride]) -> ScheduleOverride | None:
    """Select the override for target_date.

    Args:
        target_date: Date to check
        overrides: All overrides for the user

    Returns:
        Override with the lexicographically greatest id among those on
        target_date, or None
    """
    matching = [o for o in overrides if o.date == target_date]
    if not matching:
        return None
    if len(matching) > 1:
        logger.warning(
            "Duplicate schedule overrides for one date",
            date=target_date,
            override_ids=[o.id for o in matching],
        )
    return max(matching, key=lambda o: o.id)


def select_weekly_window(
    target_date: date,
    weekly_availabilities: Iterable[WeeklyAvailability],
) -> WeeklyAvailability | None:
    """Select the active weekly window for target_date's ISO day.

    Args:
        target_date: Date to check
        weekly_availabilities: All weekly rows for the user

    Returns:
        Active row with the earliest start_time (smallest id on ties), or None
    """
    iso_day = iso_day_of(target_date)
    candidates = [a for a in weekly_availabilities if a.day_of_week == iso_day and a.is_active]
    if not candidates:
        return None
    if len(candidates) > 1:
        logger.warning(
            "Multiple active weekly windows for one day",
            date=target_date,
            day_of_week=int(iso_day),
            availability_ids=[a.id for a in candidates],
        )
    return min(candidates, key=lambda a: (a.start_time, a.id))


def resolve(
    target_date: date,
    weekly_availabilities: Iterable[WeeklyAvailability],
    overrides: Iterable[ScheduleOverride],
    contexts: Iterable[ScheduleContext],
) -> EffectiveDay:
    """Resolve the effective study window and intensity for a date.

    Args:
        target_date: Date to resolve
        weekly_availabilities: Weekly availability rows
        overrides: Date-specific overrides
        contexts: Load-adjustment contexts

    Returns:
        EffectiveDay. An override with is_off=False but a missing time is
        reported as source="invalid_override" and treated as unavailable.
    """
    multiplier = active_multiplier(target_date, contexts)
    override = select_override(target_date, overrides)

    if override is not None:
        if override.is_off:
            logger.debug("Override marks day off", date=target_date, override_id=override.id)
            return EffectiveDay(
                date=target_date,
                available=False,
                load_multiplier=multiplier,
                source="override_off",
            )
        if override.start_time is None or override.end_time is None:
            logger.warning(
                "Override without isOff is missing a time; treating day as unavailable",
                date=target_date,
                override_id=override.id,
            )
            return EffectiveDay(
                date=target_date,
                available=False,
                load_multiplier=multiplier,
                source="invalid_override",
            )
        return EffectiveDay(
            date=target_date,
            available=True,
            window=TimeRange(start_time=override.start_time, end_time=override.end_time),
            load_multiplier=multiplier,
            source="override_window",
        )

    weekly = select_weekly_window(target_date, weekly_availabilities)
    if weekly is None:
        return EffectiveDay(
            date=target_date,
            available=False,
            load_multiplier=multiplier,
            source="no_availability",
        )

    return EffectiveDay(
        date=target_date,
        available=True,
        window=weekly.window,
        load_multiplier=multiplier,
        source="weekly",
    )
