"""
Club data bundle.
"""

from pydantic import BaseModel, Field

from club_leaderboard.models.attendance import AttendanceRecord
from club_leaderboard.models.calendar import CalendarEvent
from club_leaderboard.models.leaderboard import LeaderboardEntry


class ClubData(BaseModel):
    """Everything the ride tally needs, fetched before it runs."""

    events: list[CalendarEvent] = Field(default_factory=list)
    attendance: list[AttendanceRecord] = Field(default_factory=list)
    entries: list[LeaderboardEntry] = Field(default_factory=list)
