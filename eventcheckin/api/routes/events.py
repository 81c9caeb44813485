# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Event API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventcheckin.api.deps import OrganizerContext, organizer_body, require_organizer
from eventcheckin.database import get_db
from eventcheckin.schemas.event import (
    AttendeeCreate,
    AttendeeCreatedResponse,
    AttendeeListItem,
    AttendeeListResponse,
    AttendeeResponse,
    EventCreate,
    EventCreatedResponse,
    EventInfo,
    EventSummaryResponse,
)
from eventcheckin.services import event_service

router = APIRouter()


def build_summary(db: Session, event_id: int) -> EventSummaryResponse:
    """Build the event summary shared by the public and organizer views."""
    event = event_service.get_event(db, event_id)
    counts = event_service.get_event_counts(db, event_id)
    return EventSummaryResponse(
        event=EventInfo.model_validate(event),
        attendee_count=counts.attendee_count,
        checked_in_count=counts.checked_in_count,
    )


@router.post("/events", response_model=EventCreatedResponse)
def create_event(
    data: EventCreate,
    db: Session = Depends(get_db),
) -> EventCreatedResponse:
    """Create an event from a name, password and CSV roster."""
    event, errors = event_service.create_event(db, data)
    return EventCreatedResponse(
        event_id=event.id,
        attendee_count=len(event.attendees),
        csv_errors=errors,
    )


@router.get("/{event_id}", response_model=EventSummaryResponse)
def get_event_info(
    event_id: int,
    db: Session = Depends(get_db),
) -> EventSummaryResponse:
    """Get basic event info. Public."""
    return build_summary(db, event_id)


@router.get("/{event_id}/attendees", response_model=AttendeeListResponse)
def list_attendees(
    event_id: int,
    db: Session = Depends(get_db),
) -> AttendeeListResponse:
    """List attendee names and check-in state for the sign-in page. Public."""
    event_service.get_event(db, event_id)
    rows = event_service.list_attendees(db, event_id)
    return AttendeeListResponse(
        attendees=[
            AttendeeListItem(id=attendee.id, name=attendee.name, checked_in=checked_in)
            for attendee, checked_in in rows
        ]
    )


@router.get("/{event_id}/details", response_model=EventSummaryResponse)
def get_event_details(
    event_id: int,
    db: Session = Depends(get_db),
    organizer: OrganizerContext = Depends(require_organizer),
) -> EventSummaryResponse:
    """Get event details for its organizer."""
    return build_summary(db, organizer.event_id)


@router.post("/events/{event_id}/attendees", response_model=AttendeeCreatedResponse)
def add_attendee(
    event_id: int,
    data: AttendeeCreate = Depends(organizer_body(AttendeeCreate)),
    db: Session = Depends(get_db),
    organizer: OrganizerContext = Depends(require_organizer),
) -> AttendeeCreatedResponse:
    """Add a single attendee to the roster."""
    attendee = event_service.add_attendee(db, organizer.event_id, data)
    return AttendeeCreatedResponse(attendee=AttendeeResponse.model_validate(attendee))
