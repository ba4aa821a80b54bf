"""Day-of-week codec.

Two conventions coexist:
- Remote/wire: origin-zero, Sunday-first (0=Sunday ... 6=Saturday)
- Internal: ISO, origin-one, Monday-first (1=Monday ... 7=Sunday)

Every conversion goes through to_iso / to_remote. Call sites must not
inline their own "0 means Sunday" checks.
"""

from datetime import date
from enum import IntEnum

from loguru import logger

from studyengine.schedule.constants import (
    ISO_DAY_MAX,
    ISO_DAY_MIN,
    ISO_SUNDAY,
    REMOTE_DAY_MAX,
    REMOTE_DAY_MIN,
    REMOTE_SUNDAY,
)
from studyengine.schedule.errors import DayConvention, InvalidDayOfWeek, InvalidDayOfWeekError


class IsoDay(IntEnum):
    """ISO day of week (1=Monday ... 7=Sunday)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def _missing_(cls, value: object) -> "IsoDay":
        raise InvalidDayOfWeekError(value, "iso")


IsoDayResult = IsoDay | InvalidDayOfWeek
RemoteDayResult = int | InvalidDayOfWeek


def _in_range(value: object, low: int, high: int) -> bool:
    # bool is an int subclass; True/False are never days
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return low <= value <= high


def _invalid(value: object, convention: DayConvention) -> InvalidDayOfWeek:
    failure = InvalidDayOfWeek(value=value, convention=convention)
    logger.warning("Invalid day of week", value=repr(value), convention=convention)
    return failure


def to_iso(remote: int) -> IsoDayResult:
    """Convert a remote (0=Sunday) day to ISO (7=Sunday).

    Args:
        remote: Origin-zero day value from the wire

    Returns:
        IsoDay, or InvalidDayOfWeek if remote is not an int in 0..6
    """
    if not _in_range(remote, REMOTE_DAY_MIN, REMOTE_DAY_MAX):
        return _invalid(remote, "remote")
    if remote == REMOTE_SUNDAY:
        return IsoDay(ISO_SUNDAY)
    return IsoDay(remote)


def to_remote(iso: int) -> RemoteDayResult:
    """Convert an ISO day (7=Sunday) to the remote convention (0=Sunday).

    Args:
        iso: ISO day value (IsoDay or plain int)

    Returns:
        Origin-zero day value for the wire, or InvalidDayOfWeek if iso
        is not an int in 1..7
    """
    if not _in_range(iso, ISO_DAY_MIN, ISO_DAY_MAX):
        return _invalid(iso, "iso")
    if iso == ISO_SUNDAY:
        return REMOTE_SUNDAY
    return int(iso)


def iso_day_of(target_date: date) -> IsoDay:
    """Get the ISO day of week for a calendar date."""
    return IsoDay(target_date.isoweekday())
