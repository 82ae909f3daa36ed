"""
Attendance Pydantic models.

One record per calendar event, listing the members marked present.
"""

from pydantic import BaseModel, ConfigDict, Field


class AttendanceMember(BaseModel):
    """A member marked present at an event."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    member_id: str = Field(alias="memberId")
    name: str | None = None
    group: str | None = None
    marked_at: str | None = Field(default=None, alias="markedAt")


class AttendanceRecord(BaseModel):
    """Attendance for a single calendar event."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    event_id: str = Field(alias="eventId")
    iso_date: str = Field(
        default="", alias="isoDate", description="Denormalized copy of the event date"
    )
    members: dict[str, AttendanceMember] = Field(default_factory=dict)
    updated_at: str | None = Field(default=None, alias="updatedAt")
