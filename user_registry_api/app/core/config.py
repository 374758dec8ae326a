"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all; override them via
environment variables when deploying or pass an explicit ``Settings``
instance to ``create_app`` in tests.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path to a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "7000"))

    # Prefix under which all routes are mounted, e.g. ``/api``.  Empty
    # keeps the resources at ``/users`` and ``/photos``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Number of users returned per page by ``GET /users``.
    page_size: int = int(os.getenv("PAGE_SIZE", "3"))

    # When enabled, ``totalPages`` is computed as ``total // page_size + 1``
    # which over-counts by one when ``total`` is an exact multiple of the
    # page size.  Kept for clients that depend on the old numbers.
    legacy_total_pages: bool = _env_flag("PAGINATION_LEGACY_TOTAL_PAGES", "false")

    # Load the seven demo users on startup.
    seed_users: bool = _env_flag("SEED_USERS", "true")

    # Responses smaller than this many bytes are never gzip-compressed.
    gzip_minimum_size: int = int(os.getenv("GZIP_MINIMUM_SIZE", "1000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
