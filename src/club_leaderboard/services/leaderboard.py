"""
Leaderboard Report Service

Builds the yearly leaderboard: recomputed ride counts, ranks, participation
rates and per-group totals.
"""

from datetime import UTC, datetime

from loguru import logger

from club_leaderboard.models.club import ClubData
from club_leaderboard.models.leaderboard import (
    GroupSummary,
    LeaderboardEntry,
    LeaderboardReport,
    LeaderboardStanding,
    PossibleRides,
)
from club_leaderboard.services.classifier import counting_window, possible_rides
from club_leaderboard.services.ranking import (
    competition_ranks,
    group_entries,
    group_ranks,
    participation_pct,
)
from club_leaderboard.services.tally import RideTally


class LeaderboardService:
    """
    Service for building leaderboard reports.

    Usage:
        service = LeaderboardService()
        report = service.build_report(data, 2025)
    """

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime.now(UTC)

    def get_possible_rides(self, data: ClubData, year: int) -> PossibleRides:
        """Get the possible-rides denominator for a year."""
        start, end = counting_window(year, self.now)
        return PossibleRides(
            year=year,
            window_start=start,
            window_end=end,
            possible_rides=possible_rides(data.events, year, self.now),
        )

    def _group_summaries(self, entries: list[LeaderboardEntry]) -> list[GroupSummary]:
        summaries = []
        for group, members in group_entries(entries).items():
            leader = members[0] if members[0].rides > 0 else None
            summaries.append(
                GroupSummary(
                    group=group,
                    members=len(members),
                    total_rides=sum(m.rides for m in members),
                    leader=leader.name if leader else None,
                )
            )

        summaries.sort(key=lambda s: s.group)
        return summaries

    def build_report(self, data: ClubData, year: int) -> LeaderboardReport:
        """
        Build the leaderboard for a year.

        Args:
            data: Calendar events, attendance records and leaderboard entries
            year: Leaderboard year

        Returns:
            LeaderboardReport with standings sorted by rides
        """
        denominator = self.get_possible_rides(data, year)
        entries = RideTally(data.events, data.attendance, year, self.now).tally(data.entries)

        ranks = competition_ranks(entries)
        ranks_in_group = group_ranks(entries)

        standings = [
            LeaderboardStanding(
                entry=entry,
                rank=ranks[entry.id],
                group_rank=ranks_in_group[entry.id],
                participation_pct=participation_pct(entry.rides, denominator.possible_rides),
                last_ride=entry.dates[-1] if entry.dates else None,
            )
            for entry in entries
        ]

        active = sum(1 for e in entries if e.rides > 0)
        logger.info(
            f"Leaderboard {year}: {len(entries)} members, {active} active, "
            f"{denominator.possible_rides} possible rides"
        )

        return LeaderboardReport(
            year=year,
            window_start=denominator.window_start,
            window_end=denominator.window_end,
            possible_rides=denominator.possible_rides,
            total_members=len(entries),
            active_members=active,
            standings=standings,
            groups=self._group_summaries(entries),
        )
