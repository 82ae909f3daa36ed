"""
Visualization API Routes

Endpoints for generating interactive Plotly charts.
All endpoints return HTML content for embedding or viewing directly.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from club_leaderboard.api.dependencies import ClubDataDep, LeaderboardServiceDep, YearPath
from club_leaderboard.visualization import charts

router = APIRouter()


@router.get(
    "/{year}/leaderboard",
    response_class=HTMLResponse,
    summary="Rides chart",
    description="Bar chart of rides per member against the possible rides.",
)
async def get_rides_chart(
    year: YearPath,
    data: ClubDataDep,
    service: LeaderboardServiceDep,
) -> HTMLResponse:
    """Generate the rides bar chart."""
    report = service.build_report(data, year)
    return HTMLResponse(content=charts.rides_chart(report))


@router.get(
    "/{year}/groups",
    response_class=HTMLResponse,
    summary="Group totals chart",
    description="Bar chart of total rides per riding group.",
)
async def get_group_chart(
    year: YearPath,
    data: ClubDataDep,
    service: LeaderboardServiceDep,
) -> HTMLResponse:
    """Generate the group totals chart."""
    report = service.build_report(data, year)
    return HTMLResponse(content=charts.group_chart(report))
