"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from parsebot.configs.retrieval import RetrievalSettings
from parsebot.configs.settings import Settings, get_settings

__all__ = ["RetrievalSettings", "Settings", "get_settings"]
