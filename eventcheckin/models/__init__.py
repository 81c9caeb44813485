# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from eventcheckin.models.attendee import Attendee
from eventcheckin.models.base import Base, TimestampMixin
from eventcheckin.models.checkin import CheckIn
from eventcheckin.models.event import Event
from eventcheckin.models.session import Session

__all__ = [
    "Attendee",
    "Base",
    "CheckIn",
    "Event",
    "Session",
    "TimestampMixin",
]
