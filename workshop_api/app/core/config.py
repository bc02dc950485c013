"""
Configuration management.

Settings are read from environment variables exactly once, when the
process starts, by :meth:`Settings.from_env`.  The resulting object is
passed into ``create_app`` and kept on ``app.state``; request handlers
reach it only through dependencies and never consult the environment
themselves.  Defaults are provided for everything except the workshop
identifier, which scopes all collections in the document store and has
to be supplied by the deployment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


@dataclass
class Settings:
    """Application settings."""

    project_name: str = "Workshop API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Path to the SQLite file backing the document store.  Relative
    # paths are resolved against the project root by ``core.db``.
    database_url: str = "workshop.db"

    # Identifier of the workshop whose attendees, speakers and sessions
    # this instance serves.  Every collection lives under
    # ``workshop/<workshop_id>/``.
    workshop_id: Optional[str] = None

    # Deadline in seconds for a single document store operation.
    store_timeout: float = 5.0

    host: str = "0.0.0.0"
    port: int = 8080
    cors_origin: str = "http://localhost:3000"

    # Shared secret required in the ``X-Admin-Password`` header for every
    # admin route.  When unset the admin routes answer with a server
    # misconfiguration error instead of serving data.
    admin_password: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=_env_optional("LOG_FILE"),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            workshop_id=_env_optional("WORKSHOP_ID"),
            store_timeout=float(os.getenv("STORE_TIMEOUT", str(cls.store_timeout))),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            cors_origin=os.getenv("CORS_ORIGIN", cls.cors_origin),
            admin_password=_env_optional("ADMIN_PASSWORD"),
        )

    def validate(self) -> None:
        """Raise ``RuntimeError`` if a setting required to serve traffic is missing."""
        if not self.workshop_id:
            raise RuntimeError("WORKSHOP_ID is required")
        if self.store_timeout <= 0:
            raise RuntimeError("STORE_TIMEOUT must be a positive number of seconds")
