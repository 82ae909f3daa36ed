"""
API Dependencies

Shared dependencies for FastAPI route handlers including
client management, the request clock and club data loading.
"""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import Depends, HTTPException, Path
from loguru import logger

from club_leaderboard.clients.firebase import FirebaseAPIError, FirebaseClient
from club_leaderboard.models import ClubData
from club_leaderboard.services.leaderboard import LeaderboardService


class ClientManager:
    """
    Manages FirebaseClient lifecycle for the application.

    Creates a single client instance that can be reused across requests.
    """

    _client: FirebaseClient | None = None

    @classmethod
    async def get_client(cls) -> FirebaseClient:
        """Get or create the FirebaseClient instance."""
        if cls._client is None:
            cls._client = FirebaseClient()
            await cls._client.__aenter__()
        return cls._client

    @classmethod
    async def close_client(cls) -> None:
        """Close the FirebaseClient instance."""
        if cls._client is not None:
            await cls._client.__aexit__(None, None, None)
            cls._client = None


async def get_firebase_client() -> FirebaseClient:
    """Dependency to get the FirebaseClient."""
    return await ClientManager.get_client()


def get_now() -> datetime:
    """Dependency for the current time (overridden in tests)."""
    return datetime.now(UTC)


async def get_club_data(
    client: Annotated[FirebaseClient, Depends(get_firebase_client)],
) -> ClubData:
    """
    Dependency to fetch everything the leaderboard needs.

    Raises HTTPException if the database cannot be read.
    """
    try:
        return await client.fetch_club_data()
    except FirebaseAPIError as e:
        logger.error(f"Failed to fetch club data: {e.message} (status={e.status_code})")
        raise HTTPException(
            status_code=502,
            detail=f"Database unavailable: {e.message}",
        )


def get_leaderboard_service(
    now: Annotated[datetime, Depends(get_now)],
) -> LeaderboardService:
    """Dependency to get a LeaderboardService bound to the request clock."""
    return LeaderboardService(now=now)


# Type aliases for cleaner route signatures
ClubDataDep = Annotated[ClubData, Depends(get_club_data)]
LeaderboardServiceDep = Annotated[LeaderboardService, Depends(get_leaderboard_service)]


# Common path parameters
YearPath = Annotated[
    int,
    Path(description="Leaderboard year", ge=2000, le=2100),
]
