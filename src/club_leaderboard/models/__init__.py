"""Pydantic models and schemas."""

from club_leaderboard.models.attendance import AttendanceMember, AttendanceRecord
from club_leaderboard.models.calendar import CalendarEvent, EventInfo
from club_leaderboard.models.club import ClubData
from club_leaderboard.models.leaderboard import (
    GroupSummary,
    LeaderboardEntry,
    LeaderboardReport,
    LeaderboardStanding,
    PossibleRides,
)

__all__ = [
    # Attendance
    "AttendanceMember",
    "AttendanceRecord",
    # Calendar
    "CalendarEvent",
    "EventInfo",
    # Club
    "ClubData",
    # Leaderboard
    "GroupSummary",
    "LeaderboardEntry",
    "LeaderboardReport",
    "LeaderboardStanding",
    "PossibleRides",
]
