"""
recordui configuration — all environment variables in one place.

Read from environment at runtime. Nothing here is secret.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Tool limits
    MAX_TABLE_RECORDS: int = int(os.environ.get("MAX_TABLE_RECORDS", "500"))

    # Artifact sizing
    SIZE_PADDING: int = int(os.environ.get("SIZE_PADDING", "16"))

    # Host bridge: least recently seen artifacts are forgotten past this count
    MAX_TRACKED_ARTIFACTS: int = int(os.environ.get("MAX_TRACKED_ARTIFACTS", "1000"))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


# Singleton instance
settings = Settings()

if settings.MAX_TABLE_RECORDS < 1:
    raise RuntimeError("MAX_TABLE_RECORDS must be a positive integer")

if settings.MAX_TRACKED_ARTIFACTS < 1:
    raise RuntimeError("MAX_TRACKED_ARTIFACTS must be a positive integer")
