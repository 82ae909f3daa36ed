"""Data store clients."""

from club_leaderboard.clients.firebase import (
    FirebaseAPIError,
    FirebaseClient,
    SnapshotError,
    load_snapshot,
)

__all__ = ["FirebaseAPIError", "FirebaseClient", "SnapshotError", "load_snapshot"]
