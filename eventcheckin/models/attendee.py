# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Attendee model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventcheckin.models.base import Base, utcnow

if TYPE_CHECKING:
    from eventcheckin.models.checkin import CheckIn
    from eventcheckin.models.event import Event


class Attendee(Base):
    """A person on an event's roster."""

    __tablename__ = "attendees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    external_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
    )

    # Relationships
    event: Mapped[Event] = relationship("Event", back_populates="attendees")
    checkins: Mapped[list[CheckIn]] = relationship(
        "CheckIn",
        back_populates="attendee",
        cascade="all, delete-orphan",
    )
