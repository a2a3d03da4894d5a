"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
Database, document store and API settings each map their own env prefix.
"""

from backend.configs.api import ApiSettings
from backend.configs.database import DatabaseSettings
from backend.configs.settings import Settings, get_settings
from backend.configs.store import StoreSettings

__all__ = [
    "ApiSettings",
    "DatabaseSettings",
    "Settings",
    "StoreSettings",
    "get_settings",
]
