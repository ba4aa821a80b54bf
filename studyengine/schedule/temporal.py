"""Temporal parsing for wire date/time strings.

parse_instant tries encodings in a fixed priority order:
1. Trailing "Z" -> UTC instant, converted to the local zone
2. Numeric offset after the time ("+HH:MM"/"-HH:MM") -> converted to the local zone
3. No offset -> wall-clock value already in the local zone
4. Otherwise -> ParseFailure

Stripping a trailing "Z" and retrying as naive local never rescues text
that step 1 rejected: whatever fails as "+00:00" also fails without it.

Every function returns a value or a ParseFailure. Nothing here raises for
bad text and nothing here falls back to the current time.
"""

import re
from datetime import UTC, date, datetime, time, tzinfo

from loguru import logger

from studyengine.config.settings import get_local_zone
from studyengine.schedule.constants import WIRE_DATE_FORMAT, WIRE_TIME_FORMAT
from studyengine.schedule.errors import ParseFailure

InstantResult = datetime | ParseFailure
TimeResult = time | ParseFailure
DateResult = date | ParseFailure

_OFFSET_RE = re.compile(r"[+-]\d{2}(?::?\d{2})?$")
_EXCESS_FRACTION_RE = re.compile(r"(\.\d{6})\d+")
_TIME_OF_DAY_RE = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2}))?$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _failure(text: str, reason: str) -> ParseFailure:
    logger.warning("Unparseable temporal value", text=text[:64], reason=reason)
    return ParseFailure(text=text, reason=reason)


def _to_local(instant: datetime, zone: tzinfo | None) -> datetime:
    # astimezone(None) converts to the host's local zone
    return instant.astimezone(zone).replace(tzinfo=None)


def _has_offset(text: str) -> bool:
    time_part = text[text.index("T") + 1 :]
    return _OFFSET_RE.search(time_part) is not None


def _try_fromisoformat(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_instant(
    text: str,
    tz: tzinfo | None = None,
    *,
    assume_naive_utc: bool = False,
) -> InstantResult:
    """Parse a date-time string into a naive local datetime.

    Args:
        text: Date-time text (e.g. "2024-03-01T10:00:00Z")
        tz: Target local zone. Defaults to STUDYENGINE_LOCAL_TIMEZONE,
            or the host zone when that is unset.
        assume_naive_utc: Treat offset-less text as UTC instead of local
            wall-clock time. Only for call sites whose service emits naive UTC.

    Returns:
        Naive datetime in the target zone, or ParseFailure
    """
    if not isinstance(text, str):
        return _failure(repr(text), "not a string")

    cleaned = _EXCESS_FRACTION_RE.sub(r"\1", text.strip())
    if "T" not in cleaned:
        return _failure(text, "missing time component")

    zone = tz if tz is not None else get_local_zone()

    if cleaned.endswith("Z"):
        instant = _try_fromisoformat(cleaned[:-1] + "+00:00")
        if instant is not None:
            return _to_local(instant, zone)
    elif _has_offset(cleaned):
        instant = _try_fromisoformat(cleaned)
        if instant is not None and instant.tzinfo is not None:
            return _to_local(instant, zone)
    else:
        naive = _try_fromisoformat(cleaned)
        if naive is not None and naive.tzinfo is None:
            if assume_naive_utc:
                return _to_local(naive.replace(tzinfo=UTC), zone)
            return naive

    return _failure(text, "unrecognized date-time encoding")


def parse_time_of_day(text: str) -> TimeResult:
    """Parse a 24-hour "HH:MM" or "HH:MM:SS" string.

    Args:
        text: Time-of-day text

    Returns:
        time, or ParseFailure for any other shape or out-of-range field
    """
    if not isinstance(text, str):
        return _failure(repr(text), "not a string")

    match = _TIME_OF_DAY_RE.match(text.strip())
    if match is None:
        return _failure(text, "expected HH:MM[:SS]")

    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3)) if match.group(3) is not None else 0
    if hour > 23 or minute > 59 or second > 59:
        return _failure(text, "time field out of range")
    return time(hour, minute, second)


def parse_date(text: str) -> DateResult:
    """Parse a "YYYY-MM-DD" wire date."""
    if not isinstance(text, str) or not _DATE_RE.match(text.strip()):
        return _failure(str(text), "expected YYYY-MM-DD")
    try:
        return date.fromisoformat(text.strip())
    except ValueError as e:
        return _failure(text, str(e))


def format_time_of_day(value: time) -> str:
    """Format a time for the wire (HH:MM:SS)."""
    return value.strftime(WIRE_TIME_FORMAT)


def format_date(value: date) -> str:
    """Format a date for the wire (YYYY-MM-DD)."""
    return value.strftime(WIRE_DATE_FORMAT)
