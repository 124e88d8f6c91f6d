"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from parsebot.configs.base import BaseSettings
from parsebot.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    app_name: str = Field(default="parsebot", description="Service name")

    # Aggregated settings
    retrieval: RetrievalSettings = RetrievalSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from parsebot.configs import get_settings
        settings = get_settings()
    """
    return Settings()
