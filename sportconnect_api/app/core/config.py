"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via the
environment in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SportConnect API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file that service logs are also written to.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite file holding the durable snapshot.  Relative
    # paths are resolved against the package root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "sportconnect.db")

    # Key of the single record the snapshot is stored under.
    storage_key: str = os.getenv("STORAGE_KEY", "sportconnect_db_v1")

    # There is no real session handling; ``/auth/me`` resolves this
    # seeded identity.
    current_user_id: str = os.getenv("CURRENT_USER_ID", "u1")

    # Bounds of the artificial per-call delay added by the access façade.
    min_latency_ms: int = int(os.getenv("MIN_LATENCY_MS", "400"))
    max_latency_ms: int = int(os.getenv("MAX_LATENCY_MS", "800"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
