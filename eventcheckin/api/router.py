# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router."""

from fastapi import APIRouter

from eventcheckin.api.routes import auth, checkin, events, reports

api_router = APIRouter()

# Event creation and roster routes
api_router.include_router(events.router, tags=["events"])

# Organizer login and logout
api_router.include_router(auth.router, tags=["auth"])

# Attendee self sign-in
api_router.include_router(checkin.router, tags=["checkin"])

# Analytics and export
api_router.include_router(reports.router, tags=["reports"])
