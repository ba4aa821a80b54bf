"""Schedule context selection.

Picks the single active load-adjustment context for a date.

Precedence when contexts overlap:
- Latest start_date wins (a period declared inside a broader one overrides it)
- Equal start_date: greatest id wins
"""

from collections.abc import Iterable
from datetime import date

from loguru import logger

from studyengine.schedule.constants import DEFAULT_LOAD_MULTIPLIER
from studyengine.schedule.types import ScheduleContext


def active_context(target_date: date, contexts: Iterable[ScheduleContext]) -> ScheduleContext | None:
    """Get the context governing target_date.

    Args:
        target_date: Date to check
        contexts: All contexts for the user (may overlap)

    Returns:
        The winning context, or None if no context covers the date
    """
    covering = [c for c in contexts if c.covers(target_date)]
    if not covering:
        return None
    if len(covering) > 1:
        logger.warning(
            "Overlapping schedule contexts",
            date=target_date,
            context_ids=[c.id for c in covering],
        )
    return max(covering, key=lambda c: (c.start_date, c.id))


def active_multiplier(target_date: date, contexts: Iterable[ScheduleContext]) -> float:
    """Get the load multiplier for target_date (1.0 when no context applies)."""
    context = active_context(target_date, contexts)
    if context is None:
        return DEFAULT_LOAD_MULTIPLIER
    return context.load_multiplier
