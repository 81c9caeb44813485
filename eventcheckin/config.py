# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden by an environment variable of the same
    name (case-insensitive) or an entry in ``.env``.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Event Check-in"
    database_url: str = "sqlite:///./eventcheckin.db"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Sessions
    session_expiry_hours: int = 12
    session_cookie_name: str = "session"
    cookie_secure: bool = False  # Set to True behind HTTPS
    cookie_samesite: str = "lax"

    # CSRF
    csrf_cookie_name: str = "csrf_token"
    csrf_header_name: str = "X-CSRF-Token"

    # Password hashing
    bcrypt_rounds: int = 12


settings = Settings()
