"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration at all.
"""

import os
from dataclasses import dataclass


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the ``blog_api`` package directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "blog.db")

    # Which persistence accessors ``create_app`` builds when none are
    # injected: ``sqlite`` or ``memory``.
    store_backend: str = os.getenv("STORE_BACKEND", "sqlite").lower()

    # When enabled, the error responder includes the formatted traceback
    # in the ``stack`` field of 5xx responses.  Disable in production.
    expose_error_stack: bool = _flag("EXPOSE_ERROR_STACK", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "9000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
