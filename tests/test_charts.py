"""Tests for the plotly chart generators."""

from club_leaderboard.models import ClubData
from club_leaderboard.services.leaderboard import LeaderboardService
from club_leaderboard.visualization import charts


def test_rides_chart_lists_members(club_data, now):
    report = LeaderboardService(now=now).build_report(club_data, 2025)

    html = charts.rides_chart(report)

    assert "Alice" in html
    assert "Possible: 3" in html


def test_group_chart(club_data, now):
    report = LeaderboardService(now=now).build_report(club_data, 2025)

    assert "A1" in charts.group_chart(report)


def test_empty_report(now):
    report = LeaderboardService(now=now).build_report(ClubData(), 2025)

    assert charts.rides_chart(report) == "<div>No leaderboard data available</div>"
    assert charts.group_chart(report) == "<div>No group data available</div>"
