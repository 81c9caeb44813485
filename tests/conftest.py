# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from collections.abc import Callable, Sequence

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["BCRYPT_ROUNDS"] = "4"

from eventcheckin.database import get_db
from eventcheckin.main import app
from eventcheckin.models import Attendee, Event
from eventcheckin.models.base import Base
from eventcheckin.security import get_password_hash

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

EVENT_PASSWORD = "p1"  # nosec - test-only secret  # noqa: S105


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(db_session):
    """Factory for extra sessions on the test database."""
    return TestingSessionLocal


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_event(db_session) -> Callable[..., Event]:
    """Factory for persisted events with a roster."""

    def factory(
        name: str = "Spring Gala",
        password: str = EVENT_PASSWORD,
        attendees: Sequence[str] = ("Ada Lovelace", "Grace Hopper"),
        location: str | None = "Main Hall",
    ) -> Event:
        event = Event(
            name=name,
            location=location,
            password_hash=get_password_hash(password),
        )
        event.attendees = [Attendee(name=attendee) for attendee in attendees]
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        return event

    return factory


@pytest.fixture
def event(make_event) -> Event:
    """Event E with password "p1" and two attendees."""
    return make_event()


@pytest.fixture
def other_event(make_event) -> Event:
    """A second event F with its own password."""
    return make_event(name="Autumn Fair", password="f-secret", attendees=("Alan Turing",))


@pytest.fixture
def attendee(event) -> Attendee:
    """Attendee A1 of event E."""
    return next(a for a in event.attendees if a.name == "Ada Lovelace")


@pytest.fixture
def csrf_token(client, event) -> str:
    """Log the client in as organizer of event E and return the CSRF token."""
    response = client.post(f"/api/{event.id}/auth", json={"password": EVENT_PASSWORD})
    assert response.status_code == 200
    return response.json()["csrfToken"]


@pytest.fixture
def organizer_client(client, csrf_token) -> TestClient:
    """Client holding a session cookie for event E (no CSRF header set)."""
    return client
