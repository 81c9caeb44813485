# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Check-in analytics and CSV export."""

import csv
import io
import re

from sqlalchemy import func
from sqlalchemy.orm import Session

from eventcheckin.database import storage_operation
from eventcheckin.models import Attendee, CheckIn
from eventcheckin.schemas.report import (
    AnalyticsResponse,
    DailyCheckInCount,
    RecentCheckIn,
)
from eventcheckin.services import event_service

RECENT_CHECKIN_LIMIT = 10
EXPORT_HEADER = ["Name", "External ID", "Checked In", "Check-in Time"]


def get_analytics(db: Session, event_id: int) -> AnalyticsResponse:
    """Build check-in analytics for an event."""
    counts = event_service.get_event_counts(db, event_id)
    day = func.date(CheckIn.checked_in_at)

    with storage_operation(db, "analytics"):
        total_check_ins = (
            db.query(func.count(CheckIn.id))
            .filter(CheckIn.event_id == event_id)
            .scalar()
        )
        by_date = (
            db.query(day.label("day"), func.count(CheckIn.id))
            .filter(CheckIn.event_id == event_id)
            .group_by(day)
            .order_by(day)
            .all()
        )
        recent = (
            db.query(Attendee.name, CheckIn.checked_in_at)
            .select_from(CheckIn)
            .join(Attendee, CheckIn.attendee_id == Attendee.id)
            .filter(CheckIn.event_id == event_id)
            .order_by(CheckIn.checked_in_at.desc(), CheckIn.id.desc())
            .limit(RECENT_CHECKIN_LIMIT)
            .all()
        )

    return AnalyticsResponse(
        total_attendees=counts.attendee_count,
        total_checked_in=counts.checked_in_count,
        total_check_ins=total_check_ins or 0,
        check_ins_by_date=[
            DailyCheckInCount(date=str(day_value), count=count)
            for day_value, count in by_date
        ],
        recent_check_ins=[
            RecentCheckIn(attendee_name=name, checked_in_at=checked_in_at)
            for name, checked_in_at in recent
        ],
    )


def export_checkins(db: Session, event_id: int) -> str:
    """Render the event's check-ins as CSV text.

    Every check-in row is one line; attendees without a check-in get a
    single line marked "No".
    """
    with storage_operation(db, "check-in export"):
        rows = (
            db.query(Attendee.name, Attendee.external_id, CheckIn.checked_in_at)
            .outerjoin(CheckIn, CheckIn.attendee_id == Attendee.id)
            .filter(Attendee.event_id == event_id)
            .order_by(Attendee.name, Attendee.id, CheckIn.checked_in_at)
            .all()
        )

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    buffer.write(",".join(EXPORT_HEADER) + "\n")
    for name, external_id, checked_in_at in rows:
        writer.writerow(
            [
                name,
                external_id or "",
                "Yes" if checked_in_at else "No",
                checked_in_at.isoformat(sep=" ") if checked_in_at else "",
            ]
        )
    return buffer.getvalue()


def export_filename(event_name: str) -> str:
    """File name for an event's export."""
    return f"{re.sub(r'[^a-zA-Z0-9]', '_', event_name)}_checkins.csv"
