# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organizer authentication service."""

import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from eventcheckin.config import settings
from eventcheckin.database import storage_operation
from eventcheckin.exceptions import InvalidCredentials
from eventcheckin.models import Event
from eventcheckin.models.base import utcnow
from eventcheckin.models.session import Session as SessionModel
from eventcheckin.security import (
    dummy_password_hash,
    generate_csrf_token,
    generate_session_token,
    get_password_hash,
    verify_password,
)
from eventcheckin.services.session_store import SessionStore

logger = logging.getLogger(__name__)


def store_password(event: Event, raw_password: str) -> None:
    """Set the event's password hash. The caller commits."""
    event.password_hash = get_password_hash(raw_password)


def verify_event_password(event: Event, raw_password: str) -> bool:
    """Check a password against the event's stored hash."""
    return verify_password(raw_password, event.password_hash)


def authenticate(db: Session, event_id: int, raw_password: str) -> SessionModel:
    """Verify the event password and issue a new session.

    Unknown events and wrong passwords both raise InvalidCredentials, and
    both pay for one bcrypt check, so the response does not reveal which
    event ids exist.
    """
    with storage_operation(db, "event lookup"):
        event = db.get(Event, event_id)

    if event is None:
        verify_password(raw_password, dummy_password_hash())
        logger.info(f"Login failed for event {event_id}")
        raise InvalidCredentials()

    if not verify_event_password(event, raw_password):
        logger.info(f"Login failed for event {event_id}")
        raise InvalidCredentials()

    session = create_session(db, event.id)
    logger.info(f"Organizer session issued for event {event_id}")
    return session


def create_session(db: Session, event_id: int) -> SessionModel:
    """Create and persist a new session bound to one event."""
    now = utcnow()
    session = SessionModel(
        event_id=event_id,
        token=generate_session_token(),
        csrf_token=generate_csrf_token(),
        created_at=now,
        expires_at=now + timedelta(hours=settings.session_expiry_hours),
    )
    return SessionStore(db).put(session)


def logout(db: Session, token: str | None) -> None:
    """Invalidate a session. Unknown or missing tokens are ignored."""
    if SessionStore(db).delete(token):
        logger.info("Organizer session closed")


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = SessionStore(db).purge_expired()
    if count:
        logger.info(f"Purged {count} expired sessions")
    return count
