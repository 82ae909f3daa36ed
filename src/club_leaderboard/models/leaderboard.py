"""
Leaderboard Pydantic models.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class LeaderboardEntry(BaseModel):
    """
    A member's row on the leaderboard.

    On read, ``dates`` holds legacy DD/MM/YYYY strings and ``rides`` is whatever
    was last stored. Both are overwritten by the ride tally.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = "Unknown"
    group: str = "-"
    rides: int = 0
    dates: list[str] = Field(default_factory=list)


class LeaderboardStanding(BaseModel):
    """A tallied entry with its ranking."""

    entry: LeaderboardEntry
    rank: int = Field(description="Competition rank across the club (1, 1, 3...)")
    group_rank: int = Field(description="Competition rank within the member's group")
    participation_pct: int = Field(description="Rides as a percentage of possible rides")
    last_ride: str | None = None


class GroupSummary(BaseModel):
    """Ride totals for one riding group."""

    group: str
    members: int
    total_rides: int
    leader: str | None = Field(default=None, description="Name of the group's top rider")


class LeaderboardReport(BaseModel):
    """Full leaderboard for one year."""

    year: int
    window_start: date
    window_end: date
    possible_rides: int
    total_members: int
    active_members: int = Field(description="Members with at least one ride")
    standings: list[LeaderboardStanding]
    groups: list[GroupSummary]


class PossibleRides(BaseModel):
    """Possible-rides denominator for a year."""

    year: int
    window_start: date
    window_end: date
    possible_rides: int
