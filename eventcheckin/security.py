# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Password hashing and token helpers."""

import logging
import secrets
from functools import lru_cache

import bcrypt

from eventcheckin.config import settings

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72
TOKEN_BYTES = 32


def _password_bytes(password: str) -> bytes:
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        logger.warning(
            f"Password exceeds {BCRYPT_MAX_BYTES} bytes "
            f"({len(password_bytes)} bytes), truncating"
        )
        password_bytes = password_bytes[:BCRYPT_MAX_BYTES]
    return password_bytes


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            _password_bytes(password), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.error("Stored password hash is malformed")
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """Hash used to burn equivalent time when no real hash exists."""
    return get_password_hash(secrets.token_urlsafe(16))


def generate_session_token() -> str:
    """Return an unguessable session token."""
    return secrets.token_urlsafe(TOKEN_BYTES)


def generate_csrf_token() -> str:
    """Return an unguessable anti-forgery token."""
    return secrets.token_urlsafe(TOKEN_BYTES)


def tokens_match(expected: str | None, provided: str | None) -> bool:
    """Compare two tokens in constant time; missing values never match."""
    if not expected or not provided:
        return False
    return secrets.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))
