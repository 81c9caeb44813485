# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Token-keyed session storage.

The rest of the application reaches sessions only through ``SessionStore``
so the persistence behind it can change without touching the guard or the
routes. Each method is a single database round trip and holds no locks.
"""

from datetime import datetime

from sqlalchemy.orm import Session

from eventcheckin.database import storage_operation
from eventcheckin.models.base import utcnow
from eventcheckin.models.session import Session as SessionModel


class SessionStore:
    """Session persistence keyed by token."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def put(self, session: SessionModel) -> SessionModel:
        """Persist a new session."""
        with storage_operation(self.db, "session insert"):
            self.db.add(session)
            self.db.commit()
            self.db.refresh(session)
        return session

    def get_if_live(
        self, token: str | None, now: datetime | None = None
    ) -> SessionModel | None:
        """Return the session for a token unless it is unknown or expired.

        Expired rows are left in place; reading never modifies a session.
        """
        if not token:
            return None
        with storage_operation(self.db, "session lookup"):
            session = (
                self.db.query(SessionModel).filter(SessionModel.token == token).first()
            )
        if session is None or not session.is_live(now or utcnow()):
            return None
        return session

    def delete(self, token: str | None) -> bool:
        """Delete a session by token. Returns False when nothing matched."""
        if not token:
            return False
        with storage_operation(self.db, "session delete"):
            count = (
                self.db.query(SessionModel)
                .filter(SessionModel.token == token)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        return count > 0

    def purge_expired(self, now: datetime | None = None) -> int:
        """Delete all expired sessions. Returns count of deleted sessions."""
        with storage_operation(self.db, "session purge"):
            count = (
                self.db.query(SessionModel)
                .filter(SessionModel.expires_at < (now or utcnow()))
                .delete(synchronize_session=False)
            )
            self.db.commit()
        return count
