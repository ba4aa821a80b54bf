"""Root conftest for all tests.

Shared fixtures for schedule and plan tests.
"""

from datetime import time, timedelta, timezone

import pytest
from loguru import logger

from studyengine.schedule.day_of_week import IsoDay
from studyengine.schedule.types import WeeklyAvailability


@pytest.fixture
def plus_two():
    """Fixed UTC+2 zone so tests never depend on the host timezone."""
    return timezone(timedelta(hours=2))


@pytest.fixture
def loguru_messages():
    """Capture loguru records emitted during a test.

    Yields:
        List of dicts with "level", "message" and "extra"
    """
    captured: list[dict] = []

    def _sink(message):
        record = message.record
        captured.append(
            {
                "level": record["level"].name,
                "message": record["message"],
                "extra": dict(record["extra"]),
            }
        )

    handler_id = logger.add(_sink, level="DEBUG")
    yield captured
    logger.remove(handler_id)


@pytest.fixture
def tuesday_morning() -> WeeklyAvailability:
    return WeeklyAvailability(
        id="avail-tue",
        user_id="user1",
        day_of_week=IsoDay.TUESDAY,
        start_time=time(9, 0),
        end_time=time(11, 0),
        is_active=True,
    )
