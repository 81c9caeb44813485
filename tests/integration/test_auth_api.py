# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for organizer login, logout and route protection."""

from datetime import timedelta

import pytest

from eventcheckin.models.base import utcnow
from eventcheckin.models.session import Session as SessionModel


class TestLoginEndpoint:
    """Tests for POST /api/{event_id}/auth."""

    def test_login_sets_cookies(self, client, event, db_session):
        response = client.post(f"/api/{event.id}/auth", json={"password": "p1"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["csrfToken"]
        assert "expiresAt" in data

        session = db_session.query(SessionModel).one()
        assert session.event_id == event.id
        assert client.cookies.get("session") == session.token
        assert client.cookies.get("csrf_token") == data["csrfToken"] == session.csrf_token

    def test_session_cookie_is_http_only(self, client, event):
        response = client.post(f"/api/{event.id}/auth", json={"password": "p1"})

        set_cookies = response.headers.get_list("set-cookie")
        session_cookie = next(c for c in set_cookies if c.startswith("session="))
        csrf_cookie = next(c for c in set_cookies if c.startswith("csrf_token="))
        assert "httponly" in session_cookie.lower()
        assert "httponly" not in csrf_cookie.lower()
        assert "samesite=lax" in session_cookie.lower()

    def test_wrong_password(self, client, event, db_session):
        response = client.post(f"/api/{event.id}/auth", json={"password": "wrong"})

        assert response.status_code == 401
        assert response.json()["kind"] == "invalid_credentials"
        assert "session" not in response.cookies
        assert client.cookies.get("session") is None
        assert db_session.query(SessionModel).count() == 0

    def test_unknown_event_looks_like_wrong_password(self, client, event):
        unknown = client.post(f"/api/{event.id + 1000}/auth", json={"password": "p1"})
        wrong = client.post(f"/api/{event.id}/auth", json={"password": "wrong"})

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_missing_password(self, client, event):
        response = client.post(f"/api/{event.id}/auth", json={})
        assert response.status_code == 422


class TestLogoutEndpoint:
    """Tests for POST /api/{event_id}/logout."""

    def test_logout_invalidates_session(self, organizer_client, event, db_session):
        response = organizer_client.post(f"/api/{event.id}/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert db_session.query(SessionModel).count() == 0
        assert organizer_client.cookies.get("session") is None

        details = organizer_client.get(f"/api/{event.id}/details")
        assert details.status_code == 401

    def test_logout_without_session_is_not_an_error(self, client, event):
        assert client.post(f"/api/{event.id}/logout").status_code == 200
        assert client.post(f"/api/{event.id}/logout").status_code == 200


class TestProtectedRoutes:
    """Guard behaviour shared by every organizer route."""

    @pytest.mark.parametrize("path", ["details", "analytics", "export"])
    def test_requires_authentication(self, client, event, path):
        response = client.get(f"/api/{event.id}/{path}")

        assert response.status_code == 401
        assert response.json()["kind"] == "unauthenticated"

    def test_forged_cookie_is_rejected(self, client, event):
        response = client.get(
            f"/api/{event.id}/details", headers={"Cookie": "session=forged"}
        )
        assert response.status_code == 401

    def test_expired_session_is_rejected(self, organizer_client, event, db_session):
        session = db_session.query(SessionModel).one()
        session.expires_at = utcnow() - timedelta(minutes=1)
        db_session.commit()

        response = organizer_client.get(f"/api/{event.id}/details")

        assert response.status_code == 401

    def test_unauthenticated_wins_over_other_fields(self, client, event, csrf_token):
        client.cookies.clear()
        response = client.post(
            f"/api/events/{event.id}/attendees",
            json={"name": "Alan Kay"},
            headers={"X-CSRF-Token": csrf_token},
        )
        assert response.status_code == 401

    def test_malformed_body_without_session_is_unauthenticated(self, client, event):
        response = client.post(
            f"/api/events/{event.id}/attendees",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 401
        assert response.json()["kind"] == "unauthenticated"

    def test_malformed_body_without_csrf_is_rejected(self, organizer_client, event):
        response = organizer_client.post(
            f"/api/events/{event.id}/attendees",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 403
        assert response.json()["kind"] == "csrf_rejected"

    def test_malformed_body_for_other_event_is_forbidden(
        self, organizer_client, other_event, csrf_token
    ):
        response = organizer_client.post(
            f"/api/events/{other_event.id}/attendees",
            content="{not json",
            headers={"Content-Type": "application/json", "X-CSRF-Token": csrf_token},
        )

        assert response.status_code == 403
        assert response.json()["kind"] == "forbidden"

    def test_malformed_body_after_guard_is_a_validation_error(
        self, organizer_client, event, csrf_token
    ):
        response = organizer_client.post(
            f"/api/events/{event.id}/attendees",
            content="{not json",
            headers={"Content-Type": "application/json", "X-CSRF-Token": csrf_token},
        )

        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"][0] == "body"

    @pytest.mark.parametrize("path", ["details", "analytics", "export"])
    def test_other_event_is_forbidden(self, organizer_client, other_event, path):
        response = organizer_client.get(f"/api/{other_event.id}/{path}")

        assert response.status_code == 403
        assert response.json()["kind"] == "forbidden"

    def test_mutation_without_csrf_is_rejected(self, organizer_client, event):
        response = organizer_client.post(
            f"/api/events/{event.id}/attendees", json={"name": "Alan Kay"}
        )

        assert response.status_code == 403
        assert response.json()["kind"] == "csrf_rejected"

    def test_mutation_with_wrong_csrf_is_rejected(self, organizer_client, event):
        response = organizer_client.post(
            f"/api/events/{event.id}/attendees",
            json={"name": "Alan Kay"},
            headers={"X-CSRF-Token": "guess"},
        )

        assert response.status_code == 403
        assert response.json()["kind"] == "csrf_rejected"
