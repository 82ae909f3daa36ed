"""Unit tests for week key derivation."""

from datetime import date, timedelta

import pytest

from club_leaderboard.services.weeks import week_key


class TestWeekKey:
    """Weekend days share a key, consecutive weeks do not."""

    def test_saturday_and_sunday_share_key(self):
        assert week_key(date(2025, 1, 4)) == "2025-1"
        assert week_key(date(2025, 1, 5)) == "2025-1"

    def test_monday_starts_new_week(self):
        assert week_key(date(2025, 1, 6)) == "2025-2"

    def test_whole_week_shares_key(self):
        monday = date(2025, 3, 3)
        keys = {week_key(monday + timedelta(days=i)) for i in range(7)}
        assert keys == {"2025-10"}

    def test_matches_iso_week_inside_year(self):
        """2025's ISO week 1 starts on Dec 30 2024, so weeks agree until late December."""
        day = date(2025, 1, 1)
        while day <= date(2025, 12, 28):
            assert week_key(day) == f"2025-{day.isocalendar().week}"
            day += timedelta(days=1)


class TestWeekKeyYearBoundary:
    """The calendar year is the anchor, not the ISO week-year."""

    @pytest.mark.parametrize(
        "day, expected",
        [
            (date(2024, 12, 28), "2024-52"),
            (date(2024, 12, 29), "2024-52"),
            (date(2024, 12, 30), "2024-53"),  # ISO: 2025-W01
            (date(2024, 12, 31), "2024-53"),  # ISO: 2025-W01
            (date(2025, 1, 1), "2025-1"),
            (date(2023, 12, 30), "2023-52"),
            (date(2023, 12, 31), "2023-52"),
            (date(2027, 1, 1), "2027-0"),  # ISO: 2026-W53
            (date(2027, 1, 3), "2027-0"),
            (date(2027, 1, 4), "2027-1"),
        ],
    )
    def test_boundary_dates(self, day, expected):
        assert week_key(day) == expected

    def test_same_iso_week_split_across_years(self):
        """Dec 31 2024 and Jan 1 2025 are one ISO week but get different keys."""
        assert week_key(date(2024, 12, 31)) != week_key(date(2025, 1, 1))
