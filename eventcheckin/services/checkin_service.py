# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Attendee check-in service."""

import logging
from dataclasses import dataclass

from sqlalchemy import DateTime, Integer, exists, insert, literal, select
from sqlalchemy.orm import Session

from eventcheckin.database import storage_operation
from eventcheckin.exceptions import AttendeeNotFound
from eventcheckin.models import Attendee, CheckIn
from eventcheckin.models.base import utcnow

logger = logging.getLogger(__name__)

REPEAT_MESSAGE = "You were already signed in, but we've recorded this additional check-in."


@dataclass
class SignInResult:
    """Outcome of a sign-in attempt."""

    attendee_name: str
    already_signed_in: bool
    checkin_id: int

    @property
    def message(self) -> str | None:
        return REPEAT_MESSAGE if self.already_signed_in else None


def get_attendee_for_event(
    db: Session, event_id: int, attendee_id: int, lock: bool = False
) -> Attendee:
    """Get an attendee that belongs to the given event.

    With ``lock`` the attendee row is selected FOR UPDATE, which holds off
    other sign-ins for the same attendee until this transaction ends.
    SQLite has no row locks and ignores it.
    """
    with storage_operation(db, "attendee lookup"):
        query = db.query(Attendee).filter(
            Attendee.id == attendee_id,
            Attendee.event_id == event_id,
        )
        if lock:
            query = query.with_for_update()
        attendee = query.first()
    if attendee is None:
        raise AttendeeNotFound()
    return attendee


def sign_in(db: Session, event_id: int, attendee_id: int) -> SignInResult:
    """Record a check-in and report whether one already existed.

    Every attempt inserts a row. The repeat flag is computed inside the
    same INSERT ... SELECT statement as the write. Concurrent sign-ins for
    one attendee are serialized by the attendee row lock on server
    databases and by the single writer on SQLite, so exactly one of them
    sees no earlier row.
    """
    attendee = get_attendee_for_event(db, event_id, attendee_id, lock=True)
    attendee_name = attendee.name

    checkins = CheckIn.__table__
    prior = checkins.alias("prior")
    already_checked_in = exists().where(
        prior.c.event_id == event_id,
        prior.c.attendee_id == attendee_id,
    )
    stmt = (
        insert(checkins)
        .from_select(
            ["event_id", "attendee_id", "checked_in_at", "is_repeat"],
            select(
                literal(event_id, Integer()),
                literal(attendee_id, Integer()),
                literal(utcnow(), DateTime()),
                already_checked_in,
            ),
        )
        .returning(checkins.c.id, checkins.c.is_repeat)
    )

    with storage_operation(db, "check-in insert"):
        row = db.execute(stmt).one()
        db.commit()

    result = SignInResult(
        attendee_name=attendee_name,
        already_signed_in=bool(row.is_repeat),
        checkin_id=row.id,
    )
    if result.already_signed_in:
        logger.warning(f"Attendee {attendee_name} already signed in to event {event_id}")
    else:
        logger.info(f"{attendee_name} signed in to event {event_id}")
    return result
