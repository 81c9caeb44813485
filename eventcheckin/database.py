# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database engine, session factory and request dependency."""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from eventcheckin.config import settings
from eventcheckin.exceptions import StorageFailure

logger = logging.getLogger(__name__)

connect_args = (
    {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
)
engine = create_engine(settings.database_url, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create all tables that do not exist yet."""
    # Import models so they are registered with Base.metadata
    import eventcheckin.models  # noqa: F401
    from eventcheckin.models.base import Base

    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def storage_operation(db: Session, description: str) -> Iterator[None]:
    """Roll back and raise StorageFailure when a database call fails."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Storage failure during {description}: {e}")
        raise StorageFailure() from e
