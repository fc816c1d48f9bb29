"""
Newsroom configuration — all environment variables in one place.

Read from environment at runtime. Defaults suit local development.
"""

from __future__ import annotations

import os

from newsroom.kernel.session import DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD


def _flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Application settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    SITE_NAME: str = os.environ.get("SITE_NAME", "TechNova")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # Admin credential (placeholder check, not a security boundary)
    ADMIN_EMAIL: str = os.environ.get("ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL)
    ADMIN_PASSWORD: str = os.environ.get("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)

    # Content
    SEED_DEMO_CONTENT: bool = _flag("SEED_DEMO_CONTENT")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


# Singleton instance
settings = Settings()

if settings.is_production and settings.ADMIN_PASSWORD == DEFAULT_ADMIN_PASSWORD:
    raise RuntimeError("ADMIN_PASSWORD must be changed from the demo default in production")
