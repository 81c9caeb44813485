# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""

from eventcheckin.schemas.auth import AuthResponse, LoginRequest
from eventcheckin.schemas.checkin import SignInRequest, SignInResponse
from eventcheckin.schemas.common import CamelModel, HealthResponse, SuccessResponse
from eventcheckin.schemas.event import (
    AttendeeCreate,
    AttendeeCreatedResponse,
    AttendeeListItem,
    AttendeeListResponse,
    AttendeeResponse,
    EventCreate,
    EventCreatedResponse,
    EventInfo,
    EventSummaryResponse,
)
from eventcheckin.schemas.report import (
    AnalyticsResponse,
    DailyCheckInCount,
    RecentCheckIn,
)

__all__ = [
    "AnalyticsResponse",
    "AttendeeCreate",
    "AttendeeCreatedResponse",
    "AttendeeListItem",
    "AttendeeListResponse",
    "AttendeeResponse",
    "AuthResponse",
    "CamelModel",
    "DailyCheckInCount",
    "EventCreate",
    "EventCreatedResponse",
    "EventInfo",
    "EventSummaryResponse",
    "HealthResponse",
    "LoginRequest",
    "RecentCheckIn",
    "SignInRequest",
    "SignInResponse",
    "SuccessResponse",
]
