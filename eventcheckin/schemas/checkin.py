# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Check-in schemas."""

from eventcheckin.schemas.common import CamelModel


class SignInRequest(CamelModel):
    """Attendee self sign-in."""

    attendee_id: int


class SignInResponse(CamelModel):
    """Outcome of a sign-in attempt."""

    success: bool = True
    attendee_name: str
    already_signed_in: bool
    message: str | None = None
