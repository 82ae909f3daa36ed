"""
Leaderboard ranking helpers.
"""

import math
from collections import defaultdict

from club_leaderboard.models.leaderboard import LeaderboardEntry


def competition_ranks(entries: list[LeaderboardEntry]) -> dict[str, int]:
    """
    Rank entries already sorted by rides (descending).

    Tied members share a rank and the next rank skips ahead (1, 1, 3, 4...).

    Args:
        entries: Entries sorted by rides, highest first

    Returns:
        Dict mapping member id to rank
    """
    ranks: dict[str, int] = {}
    for index, entry in enumerate(entries):
        if index > 0 and entry.rides == entries[index - 1].rides:
            ranks[entry.id] = ranks[entries[index - 1].id]
        else:
            ranks[entry.id] = index + 1
    return ranks


def group_entries(entries: list[LeaderboardEntry]) -> dict[str, list[LeaderboardEntry]]:
    """Split entries by group, keeping their order."""
    groups: dict[str, list[LeaderboardEntry]] = defaultdict(list)
    for entry in entries:
        groups[entry.group].append(entry)
    return dict(groups)


def group_ranks(entries: list[LeaderboardEntry]) -> dict[str, int]:
    """Competition ranks computed within each group."""
    ranks: dict[str, int] = {}
    for members in group_entries(entries).values():
        ranks.update(competition_ranks(members))
    return ranks


def participation_pct(rides: int, possible: int) -> int:
    """Rides as a whole percentage of possible rides (half rounds up)."""
    if possible <= 0:
        return 0
    return math.floor(rides / possible * 100 + 0.5)
