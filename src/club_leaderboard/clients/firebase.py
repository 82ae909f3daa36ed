"""
Async Firebase Realtime Database Client

Reads the calendar, attendance and leaderboard trees through the database's
REST API. Uses httpx for async HTTP requests with connection pooling.

REST API Documentation: https://firebase.google.com/docs/reference/rest/database
"""

import asyncio
import json
from pathlib import Path
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from club_leaderboard.config import Settings, get_settings
from club_leaderboard.models import (
    AttendanceRecord,
    CalendarEvent,
    ClubData,
    LeaderboardEntry,
)


class FirebaseAPIError(Exception):
    """Exception raised for Firebase REST API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class SnapshotError(Exception):
    """Exception raised when a database export cannot be read."""


def _children(data: Any) -> list[tuple[str, dict]]:
    """Child key/value pairs of a tree node, skipping non-object children."""
    if not isinstance(data, dict):
        return []
    return [(key, value) for key, value in data.items() if isinstance(value, dict)]


def parse_calendar_events(data: Any) -> list[CalendarEvent]:
    """Convert a ``calendar-events`` tree into events sorted by date."""
    events = []
    for key, value in _children(data):
        try:
            events.append(CalendarEvent(**{**value, "id": key}))
        except ValidationError as e:
            logger.warning(f"Skipping calendar event {key}: {e}")
    events.sort(key=lambda e: e.iso_date)
    return events


def parse_attendance(data: Any) -> list[AttendanceRecord]:
    """Convert an ``attendance`` tree keyed by event id into records."""
    records = []
    for event_id, value in _children(data):
        members = {
            member_id: {"memberId": member_id, **member}
            for member_id, member in _children(value.get("members"))
        }
        try:
            records.append(
                AttendanceRecord(
                    event_id=event_id,
                    iso_date=value.get("isoDate") or "",
                    members=members,
                    updated_at=value.get("updatedAt"),
                )
            )
        except ValidationError as e:
            logger.warning(f"Skipping attendance for event {event_id}: {e}")
    return records


def parse_leaderboard(data: Any) -> list[LeaderboardEntry]:
    """Convert a ``leaderboard`` tree into entries sorted by stored rides."""
    entries = []
    for key, value in _children(data):
        try:
            entries.append(LeaderboardEntry(**{**value, "id": key}))
        except ValidationError as e:
            logger.warning(f"Skipping leaderboard entry {key}: {e}")
    entries.sort(key=lambda e: e.rides, reverse=True)
    return entries


def parse_club_data(data: dict, settings: Settings | None = None) -> ClubData:
    """Build ClubData from a database root object."""
    settings = settings or get_settings()
    return ClubData(
        events=parse_calendar_events(data.get(settings.calendar_path)),
        attendance=parse_attendance(data.get(settings.attendance_path)),
        entries=parse_leaderboard(data.get(settings.leaderboard_path)),
    )


def load_snapshot(path: str | Path, settings: Settings | None = None) -> ClubData:
    """
    Load ClubData from a Realtime Database JSON export.

    Args:
        path: Path to the exported JSON file
        settings: Optional settings (for the tree paths)

    Returns:
        ClubData

    Raises:
        SnapshotError: If the file is missing, not JSON, or not an object
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot {path} must contain a JSON object")

    return parse_club_data(data, settings)


class FirebaseClient:
    """
    Async read-only client for the Firebase Realtime Database REST API.

    Usage:
        async with FirebaseClient() as client:
            data = await client.fetch_club_data()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "FirebaseClient":
        """Create HTTP client on context entry."""
        self._client = httpx.AsyncClient(
            base_url=self.settings.firebase_database_url,
            timeout=httpx.Timeout(self.settings.firebase_timeout),
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close HTTP client on context exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError(
                "FirebaseClient must be used as async context manager: "
                "async with FirebaseClient() as client: ..."
            )
        return self._client

    async def _get(self, path: str) -> Any:
        """Read a tree node. Returns None if the node does not exist."""
        params = {"auth": self.settings.firebase_auth} if self.settings.firebase_auth else None
        try:
            response = await self.client.get(f"/{path}.json", params=params)
        except httpx.HTTPError as e:
            raise FirebaseAPIError(f"Request failed: {path}: {e}") from e

        if response.status_code == 404:
            return None

        if response.status_code != 200:
            raise FirebaseAPIError(
                f"API request failed: {path}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise FirebaseAPIError(
                f"Invalid JSON from {path}",
                status_code=response.status_code,
            ) from e

    async def get_calendar_events(self) -> list[CalendarEvent]:
        """Get all calendar events, sorted by date."""
        return parse_calendar_events(await self._get(self.settings.calendar_path))

    async def get_attendance(self) -> list[AttendanceRecord]:
        """Get attendance records for all events."""
        return parse_attendance(await self._get(self.settings.attendance_path))

    async def get_leaderboard_entries(self) -> list[LeaderboardEntry]:
        """Get all leaderboard entries."""
        return parse_leaderboard(await self._get(self.settings.leaderboard_path))

    async def fetch_club_data(self) -> ClubData:
        """
        Fetch events, attendance and leaderboard concurrently.

        Returns:
            ClubData ready for the ride tally
        """
        events, attendance, entries = await asyncio.gather(
            self.get_calendar_events(),
            self.get_attendance(),
            self.get_leaderboard_entries(),
        )
        logger.info(
            f"Fetched {len(events)} events, {len(attendance)} attendance records, "
            f"{len(entries)} leaderboard entries"
        )
        return ClubData(events=events, attendance=attendance, entries=entries)
