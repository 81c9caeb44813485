# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Event and roster service."""

import logging
from dataclasses import dataclass

from sqlalchemy import distinct, exists, func
from sqlalchemy.orm import Session

from eventcheckin.database import storage_operation
from eventcheckin.exceptions import DuplicateAttendee, EventNotFound, InvalidRoster
from eventcheckin.models import Attendee, CheckIn, Event
from eventcheckin.schemas.event import AttendeeCreate, EventCreate
from eventcheckin.services import auth_service
from eventcheckin.services.roster_service import parse_roster

logger = logging.getLogger(__name__)


@dataclass
class EventCounts:
    """Roster size and number of distinct attendees checked in."""

    attendee_count: int
    checked_in_count: int


def get_event(db: Session, event_id: int) -> Event:
    """Get an event by ID or raise EventNotFound."""
    with storage_operation(db, "event lookup"):
        event = db.get(Event, event_id)
    if event is None:
        logger.info(f"Event {event_id} not found")
        raise EventNotFound()
    return event


def create_event(db: Session, data: EventCreate) -> tuple[Event, list[str]]:
    """Create an event and import its roster.

    Returns the event with the roster parse errors. The event and all
    attendees are written in one transaction. Duplicate names on the roster
    are kept.
    """
    attendees, errors = parse_roster(data.csv_content)
    if not attendees:
        raise InvalidRoster(errors=errors)

    event = Event(name=data.name, location=data.location or None)
    auth_service.store_password(event, data.password)
    event.attendees = [
        Attendee(name=entry.name, external_id=entry.external_id) for entry in attendees
    ]

    with storage_operation(db, "event creation"):
        db.add(event)
        db.commit()
        db.refresh(event)

    logger.info(
        f"Created event {event.id} \"{event.name}\" with {len(attendees)} attendees"
    )
    return event, errors


def get_event_counts(db: Session, event_id: int) -> EventCounts:
    """Count the roster and the attendees with at least one check-in."""
    with storage_operation(db, "event counts"):
        attendee_count = (
            db.query(func.count(Attendee.id))
            .filter(Attendee.event_id == event_id)
            .scalar()
        )
        checked_in_count = (
            db.query(func.count(distinct(CheckIn.attendee_id)))
            .filter(CheckIn.event_id == event_id)
            .scalar()
        )
    return EventCounts(
        attendee_count=attendee_count or 0,
        checked_in_count=checked_in_count or 0,
    )


def list_attendees(db: Session, event_id: int) -> list[tuple[Attendee, bool]]:
    """List an event's attendees ordered by name with their check-in state."""
    checked_in = (
        exists()
        .where(CheckIn.attendee_id == Attendee.id, CheckIn.event_id == Attendee.event_id)
        .label("checked_in")
    )
    with storage_operation(db, "attendee list"):
        rows = (
            db.query(Attendee, checked_in)
            .filter(Attendee.event_id == event_id)
            .order_by(Attendee.name, Attendee.id)
            .all()
        )
    return [(attendee, bool(flag)) for attendee, flag in rows]


def get_attendee_by_name(db: Session, event_id: int, name: str) -> Attendee | None:
    """Find an attendee by name, ignoring case."""
    with storage_operation(db, "attendee lookup"):
        return (
            db.query(Attendee)
            .filter(
                Attendee.event_id == event_id,
                func.lower(Attendee.name) == name.lower(),
            )
            .first()
        )


def add_attendee(db: Session, event_id: int, data: AttendeeCreate) -> Attendee:
    """Add a single attendee, rejecting names already on the roster."""
    get_event(db, event_id)

    if get_attendee_by_name(db, event_id, data.name):
        raise DuplicateAttendee()

    attendee = Attendee(event_id=event_id, name=data.name, external_id=data.external_id)
    with storage_operation(db, "attendee insert"):
        db.add(attendee)
        db.commit()
        db.refresh(attendee)

    logger.info(f"Added attendee {attendee.name} with ID {attendee.id} to event {event_id}")
    return attendee
