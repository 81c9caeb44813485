# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Request guard for organizer routes.

Protected requests pass three checks in order:

1. session validation: the cookie token resolves to a live session
2. event access: the session is bound to the event named in the path
3. CSRF: mutating requests echo the session's anti-forgery token

The first failing check decides the outcome.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from eventcheckin.exceptions import (
    CheckinServiceError,
    CSRFRejected,
    Forbidden,
    Unauthenticated,
)
from eventcheckin.models.session import Session as SessionModel
from eventcheckin.security import tokens_match
from eventcheckin.services.session_store import SessionStore

SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class GuardOutcome(str, Enum):
    """Result of running the guard over a request."""

    PROCEED = "proceed"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    CSRF_REJECTED = "csrf_rejected"


_OUTCOME_ERRORS: dict[GuardOutcome, type[CheckinServiceError]] = {
    GuardOutcome.UNAUTHENTICATED: Unauthenticated,
    GuardOutcome.FORBIDDEN: Forbidden,
    GuardOutcome.CSRF_REJECTED: CSRFRejected,
}


@dataclass
class GuardDecision:
    """Outcome of the guard plus the resolved session, if any."""

    outcome: GuardOutcome
    session: SessionModel | None = None

    @property
    def proceed(self) -> bool:
        return self.outcome == GuardOutcome.PROCEED

    def raise_for_outcome(self) -> SessionModel:
        """Return the session, or raise the error matching the outcome."""
        if self.outcome != GuardOutcome.PROCEED or self.session is None:
            raise _OUTCOME_ERRORS.get(self.outcome, Unauthenticated)()
        return self.session


def resolve_session(
    store: SessionStore, token: str | None, now: datetime | None = None
) -> SessionModel | None:
    """Resolve a cookie token to a live session."""
    return store.get_if_live(token, now)


def verify_event_access(session_event_id: int, requested_event_id: int) -> bool:
    """Return True only if the session is bound to the requested event."""
    return session_event_id == requested_event_id


def check_csrf(session: SessionModel, method: str, csrf_token: str | None) -> bool:
    """Return True when the request may proceed past the CSRF check."""
    if method.upper() in SAFE_METHODS:
        return True
    return tokens_match(session.csrf_token, csrf_token)


def evaluate_request(
    store: SessionStore,
    token: str | None,
    requested_event_id: int,
    method: str,
    csrf_token: str | None,
    now: datetime | None = None,
) -> GuardDecision:
    """Run all guard checks for a protected request."""
    session = resolve_session(store, token, now)
    if session is None:
        return GuardDecision(GuardOutcome.UNAUTHENTICATED)

    if not verify_event_access(session.event_id, requested_event_id):
        return GuardDecision(GuardOutcome.FORBIDDEN, session)

    if not check_csrf(session, method, csrf_token):
        return GuardDecision(GuardOutcome.CSRF_REJECTED, session)

    return GuardDecision(GuardOutcome.PROCEED, session)
