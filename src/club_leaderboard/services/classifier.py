"""
Event Classification Service

Decides which calendar events count for a leaderboard year and whether
each one is a weekend or weekday ride.
"""

from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime
from types import MappingProxyType

from loguru import logger

from club_leaderboard.models.calendar import CalendarEvent, EventInfo
from club_leaderboard.services.weeks import week_key

SATURDAY = 5
SUNDAY = 6


def parse_iso_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD string (a trailing time part is ignored)."""
    try:
        return date.fromisoformat(value[:10])
    except (TypeError, ValueError):
        return None


def utc_date(now: datetime) -> date:
    """Calendar date of ``now`` in UTC. Naive datetimes are taken as UTC."""
    if now.tzinfo is not None:
        now = now.astimezone(UTC)
    return now.date()


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def event_info(day: date) -> EventInfo:
    """Build the classification for a single date."""
    return EventInfo(iso_date=day, is_weekend=is_weekend(day), week_key=week_key(day))


def counting_window(year: int, now: datetime) -> tuple[date, date]:
    """
    Get the inclusive date range counted for a year.

    The current year is counted up to today; any other year is counted
    through December 31st.

    Args:
        year: Leaderboard year
        now: Current time

    Returns:
        (start, end) dates
    """
    start = date(year, 1, 1)
    end = date(year, 12, 31)
    today = utc_date(now)
    if year == today.year:
        end = min(end, today)
    return start, end


def classify(
    events: Iterable[CalendarEvent], year: int, now: datetime
) -> Mapping[str, EventInfo]:
    """
    Classify the events that count for a year.

    Events outside the counting window are left out; an id missing from the
    result means the event does not count this year.

    Args:
        events: Calendar events
        year: Leaderboard year
        now: Current time

    Returns:
        Read-only mapping of event id to EventInfo
    """
    start, end = counting_window(year, now)
    infos: dict[str, EventInfo] = {}

    for event in events:
        day = parse_iso_date(event.iso_date)
        if day is None:
            logger.warning(f"Skipping event {event.id} with invalid date {event.iso_date!r}")
            continue
        if start <= day <= end:
            infos[event.id] = event_info(day)

    return MappingProxyType(infos)


def count_rides(infos: Iterable[EventInfo]) -> int:
    """Count ride units: one per distinct weekend week, one per distinct weekday."""
    weekend_weeks: set[str] = set()
    weekday_dates: set[date] = set()

    for info in infos:
        if info.is_weekend:
            weekend_weeks.add(info.week_key)
        else:
            weekday_dates.add(info.iso_date)

    return len(weekend_weeks) + len(weekday_dates)


def possible_rides(events: Iterable[CalendarEvent], year: int, now: datetime) -> int:
    """
    Get the maximum ride count achievable in a year's counting window.

    Args:
        events: Calendar events
        year: Leaderboard year
        now: Current time

    Returns:
        Distinct weekend weeks plus distinct weekday dates across all events
    """
    return count_rides(classify(events, year, now).values())
