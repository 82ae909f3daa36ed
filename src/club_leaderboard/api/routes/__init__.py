"""API route handlers."""

from club_leaderboard.api.routes import leaderboard, viz

__all__ = [
    "leaderboard",
    "viz",
]
