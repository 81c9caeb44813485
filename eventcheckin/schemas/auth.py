# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

from datetime import datetime

from pydantic import Field

from eventcheckin.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Organizer login with the event's shared password."""

    password: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
    """Response after a successful login."""

    success: bool = True
    csrf_token: str
    expires_at: datetime
