"""Club leaderboard: attendance-to-ride-count reconciliation."""

__version__ = "0.1.0"
