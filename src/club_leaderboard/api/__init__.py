"""API package - FastAPI routes and dependencies."""

from club_leaderboard.api.dependencies import (
    ClientManager,
    ClubDataDep,
    LeaderboardServiceDep,
    get_club_data,
    get_firebase_client,
    get_leaderboard_service,
    get_now,
)

__all__ = [
    "ClientManager",
    "get_firebase_client",
    "get_club_data",
    "get_leaderboard_service",
    "get_now",
    "ClubDataDep",
    "LeaderboardServiceDep",
]
