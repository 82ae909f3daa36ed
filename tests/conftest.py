"""Shared fixtures for the leaderboard tests.

Dates used throughout:
- 2025-01-04 / 2025-01-05 are a Saturday and Sunday in the same week
- 2025-01-06 is the following Monday
- "today" is Sunday 2025-06-15
"""

from datetime import UTC, datetime

import pytest

from club_leaderboard.models import (
    AttendanceMember,
    AttendanceRecord,
    CalendarEvent,
    ClubData,
    LeaderboardEntry,
)

NOW = datetime(2025, 6, 15, 10, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_event():
    """Factory for calendar events; the id defaults to E-<date>."""

    def _make(iso_date: str, event_id: str | None = None) -> CalendarEvent:
        return CalendarEvent(id=event_id or f"E-{iso_date}", iso_date=iso_date)

    return _make


@pytest.fixture
def make_record():
    """Factory for attendance records."""

    def _make(event_id: str, iso_date: str, *member_ids: str) -> AttendanceRecord:
        return AttendanceRecord(
            event_id=event_id,
            iso_date=iso_date,
            members={
                member_id: AttendanceMember(
                    member_id=member_id,
                    name=member_id.title(),
                    group="A1",
                    marked_at="2025-01-01T00:00:00Z",
                )
                for member_id in member_ids
            },
        )

    return _make


@pytest.fixture
def make_entry():
    """Factory for leaderboard entries."""

    def _make(
        member_id: str,
        dates: list[str] | None = None,
        group: str = "A1",
        rides: int = 0,
        name: str | None = None,
    ) -> LeaderboardEntry:
        return LeaderboardEntry(
            id=member_id,
            name=name or member_id.title(),
            group=group,
            rides=rides,
            dates=dates or [],
        )

    return _make


@pytest.fixture
def club_data(make_event, make_record, make_entry) -> ClubData:
    """
    A small club in 2025:

    - alice: both days of the first weekend plus the Monday (2 rides)
    - bob: Saturday only (1 ride), stale legacy dates that must be ignored
    - carol: no attendance, legacy Monday/Tuesday (2 rides), group B2
    - dave: nothing (0 rides), group B2
    """
    events = [
        make_event("2025-01-04"),
        make_event("2025-01-05"),
        make_event("2025-01-06"),
        make_event("2025-03-01"),
    ]
    attendance = [
        make_record("E-2025-01-04", "2025-01-04", "alice", "bob"),
        make_record("E-2025-01-05", "2025-01-05", "alice"),
        make_record("E-2025-01-06", "2025-01-06", "alice"),
    ]
    entries = [
        make_entry("dave", group="B2"),
        make_entry("carol", ["03/02/2025", "04/02/2025"], group="B2"),
        make_entry("bob", ["10/02/2025", "11/02/2025", "12/02/2025"], rides=3),
        make_entry("alice"),
    ]
    return ClubData(events=events, attendance=attendance, entries=entries)
