# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Event model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventcheckin.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from eventcheckin.models.attendee import Attendee
    from eventcheckin.models.checkin import CheckIn
    from eventcheckin.models.session import Session


class Event(Base, TimestampMixin):
    """An event with a roster and a shared organizer password."""

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    attendees: Mapped[list[Attendee]] = relationship(
        "Attendee",
        back_populates="event",
        cascade="all, delete-orphan",
    )
    checkins: Mapped[list[CheckIn]] = relationship(
        "CheckIn",
        back_populates="event",
        cascade="all, delete-orphan",
    )
    sessions: Mapped[list[Session]] = relationship(
        "Session",
        back_populates="event",
        cascade="all, delete-orphan",
    )
