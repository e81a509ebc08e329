"""Pytest configuration and shared test helpers.

Provides:
1. Marker registration for unit/integration tests
2. Automatic asyncio marking for coroutine tests
3. Builders for conference payloads
"""

import inspect
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from src.schemas.conference_schemas import Session, Speaker, Track

# Conference runs in UTC-5 so calendar dates differ from UTC for late sessions
CONFERENCE_TZ = timezone(timedelta(hours=-5))


def at(day: int, hour: int, minute: int = 0) -> datetime:
    """Timestamp on 2024-06-<day> in the conference time zone.

    2024-06-03 is a Monday.
    """
    return datetime(2024, 6, day, hour, minute, tzinfo=CONFERENCE_TZ)


def make_session(
    session_id: int = 1,
    *,
    title: str | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
    track_id: int | None = None,
    abstract: str | None = None,
    speakers: tuple[Speaker, ...] = (),
) -> Session:
    """Helper to create a Session for testing.

    When ``start`` is given without ``end`` the session lasts one hour.
    """
    if start is not None and end is None:
        end = start + timedelta(hours=1)
    return Session(
        id=session_id,
        title=title or f"Session {session_id}",
        abstract=abstract,
        start_time=start,
        end_time=end,
        track_id=track_id,
        track=Track(id=track_id, name=f"Track {track_id}") if track_id else None,
        speakers=speakers,
    )


def session_payload(session_id: int = 1, **overrides: Any) -> dict[str, Any]:
    """Build a session JSON object as the back-end returns it."""
    payload: dict[str, Any] = {
        "id": session_id,
        "title": f"Session {session_id}",
        "abstract": "First paragraph.\r\nSecond paragraph.",
        "startTime": "2024-06-03T09:00:00-05:00",
        "endTime": "2024-06-03T10:00:00-05:00",
        "trackId": 1,
        "track": {"id": 1, "name": "Web"},
        "speakers": [{"id": 7, "name": "Ada Lovelace"}],
    }
    payload.update(overrides)
    return payload


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests against mocked HTTP transport"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
