# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Analytics schemas."""

from datetime import datetime

from eventcheckin.schemas.common import CamelModel


class DailyCheckInCount(CamelModel):
    """Check-in rows recorded on one calendar day."""

    date: str
    count: int


class RecentCheckIn(CamelModel):
    """A recently recorded check-in."""

    attendee_name: str
    checked_in_at: datetime


class AnalyticsResponse(CamelModel):
    """Check-in analytics for an event."""

    total_attendees: int
    total_checked_in: int
    total_check_ins: int
    check_ins_by_date: list[DailyCheckInCount]
    recent_check_ins: list[RecentCheckIn]
