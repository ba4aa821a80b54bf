"""Canonical schedule error types.

Two families:
- Returned: InvalidDayOfWeek, ParseFailure, MappingFailure (explicit result values)
- Raised: InvalidDayOfWeekError, only from IsoDay construction so that
  pydantic validation of an IsoDay field fails loudly

No parser in this package substitutes the current time for bad input.
The caller sees a failure value and decides what to show.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

DayConvention = Literal["remote", "iso"]


def _expected_range(convention: DayConvention) -> str:
    return "0..6" if convention == "remote" else "1..7"


class InvalidDayOfWeekError(ValueError):
    """Raised when an IsoDay is constructed from an out-of-range value.

    Attributes:
        value: Offending value as received
        convention: "remote" (0..6, Sunday-first) or "iso" (1..7, Monday-first)
    """

    def __init__(self, value: object, convention: DayConvention):
        self.value = value
        self.convention = convention
        super().__init__(f"Invalid {convention} day of week: {value!r} (expected {_expected_range(convention)})")


class InvalidDayOfWeek(BaseModel):
    """Day-of-week value outside its convention's range.

    Returned by to_iso / to_remote instead of a day; never raised.

    Attributes:
        value: Offending value as received
        convention: "remote" (0..6, Sunday-first) or "iso" (1..7, Monday-first)
    """

    model_config = ConfigDict(frozen=True)

    value: Any
    convention: DayConvention

    @property
    def reason(self) -> str:
        return f"Invalid {self.convention} day of week: {self.value!r} (expected {_expected_range(self.convention)})"


class ParseFailure(BaseModel):
    """Unrecognized date/time text.

    Returned instead of a value; never raised.

    Attributes:
        text: Input text as received
        reason: Short human-readable reason
    """

    model_config = ConfigDict(frozen=True)

    text: str
    reason: str


class MappingFailure(BaseModel):
    """A wire record that could not be decoded into a domain model.

    Attributes:
        record_type: Kind of record (e.g. "availability", "study_plan")
        record_id: Record id if known
        reason: Why decoding failed
    """

    model_config = ConfigDict(frozen=True)

    record_type: str
    record_id: str | None = None
    reason: str
