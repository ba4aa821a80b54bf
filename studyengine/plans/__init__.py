"""Plans module - recurrence expansion for study plans.

This module provides:
- Study plan / recurrence rule models
- Lazy due-date expansion (Daily, Weekly, Custom)
- Composition of due dates with per-date availability
"""

from studyengine.plans.calendar import StudyDay, study_days
from studyengine.plans.recurrence import due_dates, start_of_week, week_offset
from studyengine.plans.types import RecurrenceRule, RecurrenceType, StudyPlan, StudyPlanStatus

__all__ = [
    "RecurrenceRule",
    "RecurrenceType",
    "StudyDay",
    "StudyPlan",
    "StudyPlanStatus",
    "due_dates",
    "start_of_week",
    "study_days",
    "week_offset",
]
