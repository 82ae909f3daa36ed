"""
Week key derivation.

Weekend rides are collapsed per week, so every date needs a key that is
shared by all days of its Monday-to-Sunday week.
"""

import math
from datetime import date, timedelta


def week_key(day: date) -> str:
    """
    Map a date to a ``"{year}-{week}"`` key following ISO-8601 week numbering.

    Week 1 is the week containing January 4th. The year used is the date's
    calendar year, not the ISO week-year: December 30th 2024 yields
    ``"2024-53"`` rather than ISO's 2025-W01, and January days before the
    first Monday of week 1 yield week 0.

    Args:
        day: Calendar date (UTC)

    Returns:
        Week key string
    """
    jan4 = date(day.year, 1, 4)
    start_of_week1 = jan4 - timedelta(days=jan4.weekday())
    week = math.ceil(((day - start_of_week1).days + 1) / 7)
    return f"{day.year}-{week}"
