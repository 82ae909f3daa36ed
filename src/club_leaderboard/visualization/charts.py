"""
Plotly Chart Generators

Generates interactive charts for the club leaderboard.
All charts return HTML strings for embedding or standalone use.
"""

import plotly.graph_objects as go

from club_leaderboard.models.leaderboard import LeaderboardReport


DARK_THEME = {
    "paper_bgcolor": "#1a1a2e",
    "plot_bgcolor": "#16213e",
    "font_color": "#e8e8e8",
    "gridcolor": "#2d3a4f",
    "colorway": [
        "#10b981",
        "#00d9ff",
        "#ff6b6b",
        "#ffe66d",
        "#a855f7",
        "#f97316",
        "#3b82f6",
        "#84cc16",
    ],
}


def _apply_dark_theme(fig: go.Figure) -> go.Figure:
    """Apply dark theme styling to a figure."""
    fig.update_layout(
        paper_bgcolor=DARK_THEME["paper_bgcolor"],
        plot_bgcolor=DARK_THEME["plot_bgcolor"],
        font={"color": DARK_THEME["font_color"], "family": "Inter, sans-serif"},
        colorway=DARK_THEME["colorway"],
        margin={"l": 60, "r": 40, "t": 60, "b": 60},
    )
    fig.update_xaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    fig.update_yaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    return fig


def rides_chart(report: LeaderboardReport, title: str | None = None) -> str:
    """
    Create a horizontal bar chart of rides per member.

    A dashed line marks the possible rides for the year.

    Args:
        report: Leaderboard report
        title: Chart title (defaults to the report year)

    Returns:
        HTML string containing the chart
    """
    if not report.standings:
        return "<div>No leaderboard data available</div>"

    standings = list(reversed(report.standings))
    names = [s.entry.name for s in standings]
    rides = [s.entry.rides for s in standings]
    hover = [
        f"{s.entry.name} ({s.entry.group})<br>Rank {s.rank} - {s.participation_pct}%"
        for s in standings
    ]

    fig = go.Figure(
        go.Bar(
            x=rides,
            y=names,
            orientation="h",
            hovertext=hover,
            hoverinfo="text",
            text=rides,
            textposition="outside",
        )
    )

    if report.possible_rides > 0:
        fig.add_vline(
            x=report.possible_rides,
            line_dash="dash",
            line_color="#ffe66d",
            annotation_text=f"Possible: {report.possible_rides}",
        )

    fig.update_layout(
        title=title or f"Leaderboard {report.year}",
        xaxis_title="Rides",
        height=max(400, 24 * len(names) + 120),
        showlegend=False,
    )
    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")


def group_chart(report: LeaderboardReport, title: str | None = None) -> str:
    """
    Create a bar chart of total rides per group.

    Args:
        report: Leaderboard report
        title: Chart title (defaults to the report year)

    Returns:
        HTML string containing the chart
    """
    if not report.groups:
        return "<div>No group data available</div>"

    fig = go.Figure(
        go.Bar(
            x=[g.group for g in report.groups],
            y=[g.total_rides for g in report.groups],
            hovertext=[
                f"{g.members} members<br>Leader: {g.leader or '-'}" for g in report.groups
            ],
            hoverinfo="text+y",
        )
    )
    fig.update_layout(
        title=title or f"Rides by group {report.year}",
        xaxis_title="Group",
        yaxis_title="Total rides",
        showlegend=False,
    )
    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")
