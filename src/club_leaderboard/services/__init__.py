"""Business logic services."""

from club_leaderboard.services.classifier import classify, counting_window, possible_rides
from club_leaderboard.services.leaderboard import LeaderboardService
from club_leaderboard.services.tally import RideTally, tally
from club_leaderboard.services.weeks import week_key

__all__ = [
    # Weeks
    "week_key",
    # Classification
    "classify",
    "counting_window",
    "possible_rides",
    # Tally
    "RideTally",
    "tally",
    # Leaderboard
    "LeaderboardService",
]
