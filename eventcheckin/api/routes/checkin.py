# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Attendee sign-in endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventcheckin.database import get_db
from eventcheckin.schemas.checkin import SignInRequest, SignInResponse
from eventcheckin.services import checkin_service

router = APIRouter()


@router.post("/{event_id}/signin", response_model=SignInResponse)
def sign_in(
    event_id: int,
    data: SignInRequest,
    db: Session = Depends(get_db),
) -> SignInResponse:
    """Sign an attendee in. Repeat attempts are recorded and flagged."""
    result = checkin_service.sign_in(db, event_id, data.attendee_id)
    return SignInResponse(
        attendee_name=result.attendee_name,
        already_signed_in=result.already_signed_in,
        message=result.message,
    )
