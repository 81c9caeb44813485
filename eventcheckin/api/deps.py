# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from eventcheckin.config import settings
from eventcheckin.database import get_db
from eventcheckin.services.guard import evaluate_request
from eventcheckin.services.session_store import SessionStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class OrganizerContext:
    """Authenticated organizer identity for one request."""

    event_id: int
    session_id: int


def require_organizer(
    event_id: int,
    request: Request,
    db: Session = Depends(get_db),
) -> OrganizerContext:
    """Guard an organizer route for the event named in the path.

    Raises Unauthenticated, Forbidden or CSRFRejected before the handler
    runs. On success the bound event id is stored on ``request.state``.
    """
    decision = evaluate_request(
        SessionStore(db),
        token=request.cookies.get(settings.session_cookie_name),
        requested_event_id=event_id,
        method=request.method,
        csrf_token=request.headers.get(settings.csrf_header_name),
    )
    if not decision.proceed:
        logger.warning(
            f"Rejected {request.method} {request.url.path}: {decision.outcome.value}"
        )
    session = decision.raise_for_outcome()

    request.state.event_id = session.event_id
    return OrganizerContext(event_id=session.event_id, session_id=session.id)


def organizer_body(model: type[ModelT]) -> Callable[..., Awaitable[ModelT]]:
    """Build a dependency that parses the JSON body only after the guard passes.

    A body declared as a plain handler parameter is decoded before any
    dependency runs, so a malformed body would answer 422 ahead of the
    guard's 401/403. Routes that take this dependency declare no body
    parameter of their own.
    """

    async def read_body(
        request: Request,
        organizer: OrganizerContext = Depends(require_organizer),
    ) -> ModelT:
        try:
            return model.model_validate_json(await request.body())
        except ValidationError as e:
            raise RequestValidationError(
                [
                    {**error, "loc": ("body", *error["loc"])}
                    for error in e.errors(include_url=False)
                ]
            ) from e

    return read_body
