"""
Calendar-related Pydantic models.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class CalendarEvent(BaseModel):
    """A scheduled club outing from the calendar store."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str
    iso_date: str = Field(default="", alias="isoDate", description="Event date as YYYY-MM-DD")


class EventInfo(BaseModel):
    """Classification of a counted event for one leaderboard year."""

    model_config = ConfigDict(frozen=True)

    iso_date: date
    is_weekend: bool
    week_key: str = Field(description="Week identifier used to collapse weekend rides")
