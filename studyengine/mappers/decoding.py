"""Shared decoding helpers for the wire mappers."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from studyengine.schedule.errors import InvalidDayOfWeek, MappingFailure, ParseFailure

T = TypeVar("T")
DtoT = TypeVar("DtoT", bound=BaseModel)


def require_value(result: T | ParseFailure | InvalidDayOfWeek, field: str) -> T:
    """Unwrap a parse or day-of-week result inside a decoder.

    Raises:
        ValueError: If result is a failure value (decoders turn this into MappingFailure)
    """
    if isinstance(result, ParseFailure):
        raise ValueError(f"{field}: {result.reason} ({result.text!r})")
    if isinstance(result, InvalidDayOfWeek):
        raise ValueError(f"{field}: {result.reason}")
    return result


def decode_all(
    payloads: Iterable[Mapping[str, Any]],
    dto_type: type[DtoT],
    decoder: Callable[[DtoT], T | MappingFailure],
    record_type: str,
) -> list[T]:
    """Decode raw payloads, skipping and logging corrupt records.

    Args:
        payloads: Raw JSON objects from the remote API
        dto_type: DTO model to validate each payload against
        decoder: Single-record decoder
        record_type: Label for log lines

    Returns:
        Successfully decoded domain models, in input order
    """
    decoded: list[T] = []
    skipped = 0
    for payload in payloads:
        try:
            dto = dto_type.model_validate(payload)
        except ValidationError as e:
            skipped += 1
            logger.warning(
                "Skipping malformed wire record",
                record_type=record_type,
                record_id=payload.get("id") if isinstance(payload, Mapping) else None,
                error_count=e.error_count(),
            )
            continue

        result = decoder(dto)
        if isinstance(result, MappingFailure):
            skipped += 1
            logger.warning(
                "Skipping corrupt wire record",
                record_type=record_type,
                record_id=result.record_id,
                reason=result.reason,
            )
            continue
        decoded.append(result)

    if skipped:
        logger.info(f"Decoded {len(decoded)} {record_type} records, skipped {skipped}")
    return decoded
