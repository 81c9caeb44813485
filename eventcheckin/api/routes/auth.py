# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Organizer authentication endpoints."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from eventcheckin.config import settings
from eventcheckin.database import get_db
from eventcheckin.schemas.auth import AuthResponse, LoginRequest
from eventcheckin.schemas.common import SuccessResponse
from eventcheckin.services import auth_service

router = APIRouter()


@router.post("/{event_id}/auth", response_model=AuthResponse)
def login(
    event_id: int,
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Log in as organizer of an event with its shared password."""
    session = auth_service.authenticate(db, event_id, data.password)
    max_age = settings.session_expiry_hours * 3600

    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        max_age=max_age,
        path="/",
    )
    # Readable by the frontend so it can echo the token in a header
    response.set_cookie(
        key=settings.csrf_cookie_name,
        value=session.csrf_token,
        httponly=False,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        max_age=max_age,
        path="/",
    )

    return AuthResponse(csrf_token=session.csrf_token, expires_at=session.expires_at)


@router.post("/{event_id}/logout", response_model=SuccessResponse)
def logout(
    event_id: int,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> SuccessResponse:
    """Log out. Safe to call without a session or with an expired one."""
    auth_service.logout(db, request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(key=settings.session_cookie_name, path="/")
    response.delete_cookie(key=settings.csrf_cookie_name, path="/")
    return SuccessResponse()
