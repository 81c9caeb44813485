# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eventcheckin import __version__
from eventcheckin.config import settings
from eventcheckin.database import SessionLocal, init_db
from eventcheckin.exceptions import CheckinServiceError
from eventcheckin.log_config import setup_logging
from eventcheckin.schemas.common import HealthResponse
from eventcheckin.services import auth_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    setup_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        auth_service.cleanup_expired_sessions(db)
    finally:
        db.close()

    logger.info("Event check-in system ready")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.app_name,
    description="Self check-in for event attendees with per-event organizer access",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CheckinServiceError)
async def checkin_error_handler(
    request: Request, exc: CheckinServiceError
) -> JSONResponse:
    """Render service errors with their status code and kind."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from eventcheckin.api.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api")
