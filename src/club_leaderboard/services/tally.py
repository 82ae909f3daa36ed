"""
Ride Tally Service

Turns attendance records and legacy date lists into one ride count per member.

Each member is backed by exactly one source. Attendance records win whenever
a member appears in at least one of them; the legacy free-text dates are only
read for members who have never been marked present.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType

from loguru import logger

from club_leaderboard.models.attendance import AttendanceRecord
from club_leaderboard.models.calendar import CalendarEvent, EventInfo
from club_leaderboard.models.leaderboard import LeaderboardEntry
from club_leaderboard.services.classifier import (
    classify,
    count_rides,
    event_info,
    parse_iso_date,
)


@dataclass(frozen=True)
class AttendanceBacked:
    """Member counted from attendance records."""

    event_ids: frozenset[str]
    iso_dates: tuple[str, ...]


@dataclass(frozen=True)
class LegacyBacked:
    """Member counted from the legacy DD/MM/YYYY date list."""

    dates: tuple[str, ...]


MemberSource = AttendanceBacked | LegacyBacked


def parse_legacy_date(value: str) -> date | None:
    """Parse a DD/MM/YYYY string, returning None if it is malformed."""
    parts = value.strip().split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def format_display_date(day: date) -> str:
    """Format as D/M/YYYY without zero padding."""
    return f"{day.day}/{day.month}/{day.year}"


def build_attendance_index(
    records: Iterable[AttendanceRecord],
) -> Mapping[str, AttendanceBacked]:
    """
    Index attendance records by member.

    Args:
        records: Attendance records, one per event

    Returns:
        Read-only mapping of member id to the events they attended
    """
    event_ids: dict[str, set[str]] = defaultdict(set)
    iso_dates: dict[str, list[str]] = defaultdict(list)

    for record in records:
        for member_id in record.members:
            event_ids[member_id].add(record.event_id)
            iso_dates[member_id].append(record.iso_date)

    return MappingProxyType({
        member_id: AttendanceBacked(
            event_ids=frozenset(ids),
            iso_dates=tuple(iso_dates[member_id]),
        )
        for member_id, ids in event_ids.items()
    })


class RideTally:
    """
    Computes ride counts for one leaderboard year.

    Rides are counted as one per distinct weekend week plus one per distinct
    weekday date. The lookup maps are built once in the constructor and never
    modified afterwards.
    """

    def __init__(
        self,
        events: Iterable[CalendarEvent],
        attendance: Iterable[AttendanceRecord],
        year: int,
        now: datetime,
    ):
        self.year = year
        self.infos = classify(events, year, now)
        self.attendance_by_member = build_attendance_index(attendance)

    def resolve_source(self, entry: LeaderboardEntry) -> MemberSource:
        """Pick the data source a member is counted from."""
        source = self.attendance_by_member.get(entry.id)
        if source is not None:
            return source
        return LegacyBacked(dates=tuple(entry.dates))

    def _display_dates(self, days: Iterable[date]) -> list[str]:
        in_year = {d for d in days if d.year == self.year}
        return [format_display_date(d) for d in sorted(in_year)]

    def _count_attendance(self, source: AttendanceBacked) -> tuple[int, list[str]]:
        infos: list[EventInfo] = []
        for event_id in source.event_ids:
            info = self.infos.get(event_id)
            if info is None:
                logger.debug(f"Event {event_id} does not count for {self.year}")
                continue
            infos.append(info)

        days = []
        for iso_date in source.iso_dates:
            day = parse_iso_date(iso_date)
            if day is None:
                logger.debug(f"Ignoring attendance date {iso_date!r}")
                continue
            days.append(day)

        return count_rides(infos), self._display_dates(days)

    def _count_legacy(self, source: LegacyBacked) -> tuple[int, list[str]]:
        days = []
        for raw in source.dates:
            day = parse_legacy_date(raw)
            if day is None:
                logger.debug(f"Skipping malformed legacy date {raw!r}")
                continue
            if day.year == self.year:
                days.append(day)

        return count_rides(event_info(d) for d in set(days)), self._display_dates(days)

    def tally_entry(self, entry: LeaderboardEntry) -> LeaderboardEntry:
        """
        Recompute rides and display dates for one member.

        Args:
            entry: Leaderboard entry as stored

        Returns:
            New entry with ``rides`` and ``dates`` replaced
        """
        source = self.resolve_source(entry)
        if isinstance(source, AttendanceBacked):
            rides, dates = self._count_attendance(source)
        else:
            rides, dates = self._count_legacy(source)

        return entry.model_copy(update={"rides": rides, "dates": dates})

    def tally(self, entries: Iterable[LeaderboardEntry]) -> list[LeaderboardEntry]:
        """Tally every member and sort by rides, highest first (stable)."""
        tallied = [self.tally_entry(entry) for entry in entries]
        tallied.sort(key=lambda e: e.rides, reverse=True)
        return tallied


def tally(
    entries: Iterable[LeaderboardEntry],
    events: Iterable[CalendarEvent],
    attendance: Iterable[AttendanceRecord],
    year: int,
    now: datetime,
) -> list[LeaderboardEntry]:
    """
    Recompute the leaderboard for a year.

    Args:
        entries: Leaderboard entries with legacy dates
        events: Calendar events
        attendance: Attendance records
        year: Leaderboard year
        now: Current time (sets the cutoff for the current year)

    Returns:
        New entries sorted by rides descending
    """
    return RideTally(events, attendance, year, now).tally(entries)
