"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an in‑memory store and console logging when no
environment is configured.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Garage Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Resource routers are mounted at the root by default (``/customers``,
    # ``/vehicles`` ...).  Set e.g. ``API_PREFIX=/api/v1`` to move them.
    api_prefix: str = os.getenv("API_PREFIX", "")
    # Passed to ``FastAPI(debug=...)``.
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # ``memory`` keeps records for the lifetime of the process; ``sqlite``
    # persists them to ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "garage.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
