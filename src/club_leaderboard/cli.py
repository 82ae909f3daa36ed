"""
Club Leaderboard CLI

Command-line interface for computing the ride leaderboard
without running the API server.
"""

import argparse
import asyncio
import sys
import webbrowser
from datetime import UTC, date, datetime, time
from pathlib import Path

from loguru import logger

from club_leaderboard.clients.firebase import (
    FirebaseAPIError,
    FirebaseClient,
    SnapshotError,
    load_snapshot,
)
from club_leaderboard.config import get_settings
from club_leaderboard.logging_config import setup_logger
from club_leaderboard.models import ClubData, LeaderboardReport
from club_leaderboard.services.leaderboard import LeaderboardService
from club_leaderboard.visualization import charts


async def load_club_data(snapshot: str | None) -> ClubData:
    """Load club data from a database export, or from Firebase if none is given."""
    if snapshot:
        return load_snapshot(snapshot)

    async with FirebaseClient() as client:
        return await client.fetch_club_data()


def parse_now(value: str | None) -> datetime:
    """Parse a --now override (YYYY-MM-DD) into a UTC datetime."""
    if not value:
        return datetime.now(UTC)
    return datetime.combine(date.fromisoformat(value), time(12, 0), tzinfo=UTC)


def print_leaderboard(report: LeaderboardReport, group: str | None = None) -> None:
    """Print the standings table."""
    print(f"🚴 Leaderboard {report.year} ({report.window_start} to {report.window_end})")
    print(f"   Possible rides: {report.possible_rides}")
    print(f"   Active members: {report.active_members}/{report.total_members}\n")

    standings = report.standings
    if group:
        standings = [s for s in standings if s.entry.group == group]
        if not standings:
            print(f"No members in group {group}.")
            return

    print(f"{'Rank':<5} {'Name':<28} {'Group':<7} {'Rides':<6} {'Rate':<6} {'Last':<11}")
    print("-" * 66)
    for s in standings:
        rank = s.group_rank if group else s.rank
        print(
            f"{rank:<5} {s.entry.name:<28} {s.entry.group:<7} {s.entry.rides:<6} "
            f"{str(s.participation_pct) + '%':<6} {s.last_ride or '-':<11}"
        )

    if not group and report.groups:
        print("\nBy group:")
        for g in report.groups:
            print(f"  {g.group}: {g.total_rides} rides, {g.members} members (leader: {g.leader or '-'})")


async def cli_main():
    """CLI entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Club ride leaderboard CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Leaderboard for the current year, read from Firebase
  club-leaderboard leaderboard

  # Leaderboard for 2024 from a database export
  club-leaderboard --year 2024 leaderboard --snapshot export.json

  # Only group B2
  club-leaderboard leaderboard --group B2

  # Possible rides as of a given day
  club-leaderboard --now 2025-06-30 possible

  # Chart
  club-leaderboard chart --output leaderboard.html --open
        """,
    )

    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Leaderboard year (default: current year)",
    )
    parser.add_argument(
        "--now",
        default=None,
        help="Treat this date (YYYY-MM-DD) as today",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_snapshot_arg(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--snapshot",
            "-s",
            default=None,
            help="Read data from a database JSON export instead of Firebase",
        )

    leaderboard_parser = subparsers.add_parser("leaderboard", help="Show the leaderboard")
    add_snapshot_arg(leaderboard_parser)
    leaderboard_parser.add_argument("--group", "-g", default=None, help="Only show one group")

    possible_parser = subparsers.add_parser("possible", help="Show possible rides")
    add_snapshot_arg(possible_parser)

    chart_parser = subparsers.add_parser("chart", help="Generate HTML rides chart")
    add_snapshot_arg(chart_parser)
    chart_parser.add_argument(
        "--output", "-o", default="leaderboard.html", help="Output file path"
    )
    chart_parser.add_argument(
        "--open", action="store_true", help="Open chart in browser"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logger(level=args.log_level, log_file=settings.log_file)

    try:
        now = parse_now(args.now)
    except ValueError:
        print(f"Invalid --now date: {args.now}")
        sys.exit(1)

    year = args.year or settings.default_year or now.year

    try:
        data = await load_club_data(args.snapshot)
    except (FirebaseAPIError, SnapshotError) as e:
        logger.error(f"Could not load club data: {e}")
        print(f"Error: {e}")
        sys.exit(1)

    service = LeaderboardService(now=now)

    if args.command == "leaderboard":
        print_leaderboard(service.build_report(data, year), args.group)

    elif args.command == "possible":
        possible = service.get_possible_rides(data, year)
        print(
            f"{possible.year}: {possible.possible_rides} possible rides "
            f"({possible.window_start} to {possible.window_end})"
        )

    elif args.command == "chart":
        report = service.build_report(data, year)
        html = (
            "<html><head><meta charset='utf-8'></head><body>"
            f"{charts.rides_chart(report)}{charts.group_chart(report)}"
            "</body></html>"
        )
        Path(args.output).write_text(html, encoding="utf-8")
        print(f"📊 Chart saved to: {args.output}")

        if args.open:
            output_path = Path(args.output).absolute()
            webbrowser.open(f"file://{output_path}")
            print(f"🌐 Opened in browser: {output_path}")


def run_cli():
    """Entry point for CLI."""
    asyncio.run(cli_main())


if __name__ == "__main__":
    run_cli()
