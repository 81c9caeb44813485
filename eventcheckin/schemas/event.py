# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Event and attendee schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from eventcheckin.schemas.common import CamelModel


class EventCreate(CamelModel):
    """Schema for creating an event from a CSV roster."""

    name: str = Field(..., min_length=1, max_length=200)
    password: str = Field(..., min_length=1)
    location: str | None = Field(None, max_length=200)
    csv_content: str = Field(..., min_length=1)


class EventCreatedResponse(CamelModel):
    """Result of event creation."""

    success: bool = True
    event_id: int
    attendee_count: int
    csv_errors: list[str] = []


class EventInfo(CamelModel):
    """Public event fields. The password hash is never exposed."""

    id: int
    name: str
    location: str | None = None
    created_at: datetime


class EventSummaryResponse(CamelModel):
    """Event info with roster and check-in counts."""

    event: EventInfo
    attendee_count: int
    checked_in_count: int


class AttendeeListItem(CamelModel):
    """Attendee entry on the public sign-in list."""

    id: int
    name: str
    checked_in: bool


class AttendeeListResponse(CamelModel):
    """Public attendee list for an event."""

    attendees: list[AttendeeListItem]


class AttendeeCreate(CamelModel):
    """Schema for adding a single attendee."""

    name: str = Field(..., max_length=200)
    external_id: str | None = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        """Trim the name and reject blank values."""
        value = value.strip()
        if not value:
            raise ValueError("Attendee name required")
        return value

    @field_validator("external_id")
    @classmethod
    def strip_external_id(cls, value: str | None) -> str | None:
        """Trim the external id, treating blank as missing."""
        if value is None:
            return None
        return value.strip() or None


class AttendeeResponse(CamelModel):
    """Attendee as returned to organizers."""

    id: int
    name: str
    external_id: str | None = None
    event_id: int


class AttendeeCreatedResponse(CamelModel):
    """Result of adding an attendee."""

    success: bool = True
    attendee: AttendeeResponse
