# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Analytics and export endpoints."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from eventcheckin.api.deps import OrganizerContext, require_organizer
from eventcheckin.database import get_db
from eventcheckin.schemas.report import AnalyticsResponse
from eventcheckin.services import event_service, report_service

router = APIRouter()


@router.get("/{event_id}/analytics", response_model=AnalyticsResponse)
def get_analytics(
    event_id: int,
    db: Session = Depends(get_db),
    organizer: OrganizerContext = Depends(require_organizer),
) -> AnalyticsResponse:
    """Get check-in analytics for the organizer's event."""
    event_service.get_event(db, organizer.event_id)
    return report_service.get_analytics(db, organizer.event_id)


@router.get("/{event_id}/export")
def export_checkins(
    event_id: int,
    db: Session = Depends(get_db),
    organizer: OrganizerContext = Depends(require_organizer),
) -> Response:
    """Download check-in data as CSV."""
    event = event_service.get_event(db, organizer.event_id)
    content = report_service.export_checkins(db, event.id)
    filename = report_service.export_filename(event.name)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
