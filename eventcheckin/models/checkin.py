# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Check-in record model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventcheckin.models.base import Base, utcnow

if TYPE_CHECKING:
    from eventcheckin.models.attendee import Attendee
    from eventcheckin.models.event import Event


class CheckIn(Base):
    """One recorded sign-in attempt. Rows are never updated or deleted."""

    __tablename__ = "checkins"
    __table_args__ = (Index("ix_checkins_event_attendee", "event_id", "attendee_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
    )
    attendee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("attendees.id", ondelete="CASCADE"),
        nullable=False,
    )
    checked_in_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
    )
    # True when an earlier check-in for the same attendee already existed
    is_repeat: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    event: Mapped[Event] = relationship("Event", back_populates="checkins")
    attendee: Mapped[Attendee] = relationship("Attendee", back_populates="checkins")
