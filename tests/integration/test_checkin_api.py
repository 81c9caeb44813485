# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for POST /api/{event_id}/signin."""

from eventcheckin.models import CheckIn


class TestSignInEndpoint:
    """Attendee self sign-in needs no session."""

    def test_first_sign_in(self, client, event, attendee, db_session):
        response = client.post(f"/api/{event.id}/signin", json={"attendeeId": attendee.id})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "attendeeName": "Ada Lovelace",
            "alreadySignedIn": False,
            "message": None,
        }
        assert db_session.query(CheckIn).count() == 1

    def test_repeat_sign_in_is_flagged_and_recorded(self, client, event, attendee, db_session):
        for _ in range(3):
            response = client.post(
                f"/api/{event.id}/signin", json={"attendeeId": attendee.id}
            )

        data = response.json()
        assert data["success"] is True
        assert data["alreadySignedIn"] is True
        assert "already signed in" in data["message"]
        assert db_session.query(CheckIn).filter_by(attendee_id=attendee.id).count() == 3

    def test_unknown_attendee(self, client, event):
        response = client.post(f"/api/{event.id}/signin", json={"attendeeId": 999999})

        assert response.status_code == 404
        assert response.json()["kind"] == "attendee_not_found"

    def test_attendee_from_other_event(self, client, event, other_event, db_session):
        outsider = other_event.attendees[0]

        response = client.post(f"/api/{event.id}/signin", json={"attendeeId": outsider.id})

        assert response.status_code == 404
        assert db_session.query(CheckIn).count() == 0

    def test_missing_attendee_id(self, client, event):
        response = client.post(f"/api/{event.id}/signin", json={})
        assert response.status_code == 422

    def test_sign_in_ignores_organizer_session(self, organizer_client, other_event):
        outsider = other_event.attendees[0]

        response = organizer_client.post(
            f"/api/{other_event.id}/signin", json={"attendeeId": outsider.id}
        )

        assert response.status_code == 200
        assert response.json()["alreadySignedIn"] is False
