"""
Leaderboard API Routes

Endpoints for yearly ride counts, rankings and the possible-rides denominator.
"""

from fastapi import APIRouter

from club_leaderboard.api.dependencies import ClubDataDep, LeaderboardServiceDep, YearPath
from club_leaderboard.models import ClubData, LeaderboardReport, PossibleRides

router = APIRouter()


@router.get(
    "/{year}",
    response_model=LeaderboardReport,
    summary="Get leaderboard",
    description="Recompute ride counts from attendance and legacy dates for a year.",
)
async def get_leaderboard(
    year: YearPath,
    data: ClubDataDep,
    service: LeaderboardServiceDep,
) -> LeaderboardReport:
    """Get the leaderboard for a year from the database."""
    return service.build_report(data, year)


@router.get(
    "/{year}/possible-rides",
    response_model=PossibleRides,
    summary="Get possible rides",
    description="Maximum number of countable rides in the year so far.",
)
async def get_possible_rides(
    year: YearPath,
    data: ClubDataDep,
    service: LeaderboardServiceDep,
) -> PossibleRides:
    """Get the possible-rides denominator for a year."""
    return service.get_possible_rides(data, year)


@router.post(
    "/{year}/compute",
    response_model=LeaderboardReport,
    summary="Compute leaderboard from supplied data",
    description="Build a leaderboard from events, attendance and entries in the request body.",
)
async def compute_leaderboard(
    year: YearPath,
    data: ClubData,
    service: LeaderboardServiceDep,
) -> LeaderboardReport:
    """Compute a leaderboard without reading the database."""
    return service.build_report(data, year)
