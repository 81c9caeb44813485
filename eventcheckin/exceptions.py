# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Error taxonomy for the check-in service.

Every failure raised by the services carries an ``ErrorKind`` tag and the
HTTP status the API layer answers with, so callers can branch on ``kind``
instead of matching message strings.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds surfaced to API clients."""

    EVENT_NOT_FOUND = "event_not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    CSRF_REJECTED = "csrf_rejected"
    ATTENDEE_NOT_FOUND = "attendee_not_found"
    DUPLICATE_ATTENDEE = "duplicate_attendee"
    INVALID_ROSTER = "invalid_roster"
    STORAGE_FAILURE = "storage_failure"


class CheckinServiceError(Exception):
    """Base exception for all check-in service errors."""

    kind: ErrorKind = ErrorKind.STORAGE_FAILURE
    status_code: int = 500
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        """JSON body returned to API clients."""
        return {"detail": self.detail, "kind": self.kind.value}


class EventNotFound(CheckinServiceError):
    """Raised when a requested event does not exist."""

    kind = ErrorKind.EVENT_NOT_FOUND
    status_code = 404
    default_detail = "Event not found"


class InvalidCredentials(CheckinServiceError):
    """Raised when an event password cannot be verified."""

    kind = ErrorKind.INVALID_CREDENTIALS
    status_code = 401
    default_detail = "Invalid credentials"


class Unauthenticated(CheckinServiceError):
    """Raised when a protected request has no live session."""

    kind = ErrorKind.UNAUTHENTICATED
    status_code = 401
    default_detail = "Not authenticated"


class Forbidden(CheckinServiceError):
    """Raised when a session is valid but bound to a different event."""

    kind = ErrorKind.FORBIDDEN
    status_code = 403
    default_detail = "Unauthorized for this event"


class CSRFRejected(CheckinServiceError):
    """Raised when a mutating request lacks a matching CSRF token."""

    kind = ErrorKind.CSRF_REJECTED
    status_code = 403
    default_detail = "CSRF token missing or invalid"


class AttendeeNotFound(CheckinServiceError):
    """Raised when an attendee does not exist within the given event."""

    kind = ErrorKind.ATTENDEE_NOT_FOUND
    status_code = 404
    default_detail = "Attendee not found for this event"


class DuplicateAttendee(CheckinServiceError):
    """Raised when adding an attendee whose name is already on the roster."""

    kind = ErrorKind.DUPLICATE_ATTENDEE
    status_code = 409
    default_detail = "An attendee with this name already exists"


class InvalidRoster(CheckinServiceError):
    """Raised when a roster upload contains no usable attendees."""

    kind = ErrorKind.INVALID_ROSTER
    status_code = 400
    default_detail = "No valid attendees found in CSV"

    def __init__(self, detail: str | None = None, errors: list[str] | None = None):
        super().__init__(detail)
        self.errors = errors or []

    def to_dict(self) -> dict:
        return {**super().to_dict(), "csvErrors": self.errors}


class StorageFailure(CheckinServiceError):
    """Raised when the underlying database operation fails."""

    kind = ErrorKind.STORAGE_FAILURE
    status_code = 500
    default_detail = "Internal server error"
