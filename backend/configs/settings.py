"""
Application settings.

Settings combines the database, document store and API sections. Each
section reads its own env prefix when Settings is constructed, so tests
can build a Settings with explicit sections and skip the environment.

Dependencies: pydantic, backend.configs
System role: Configuration root handed to create_app
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.api import ApiSettings
from backend.configs.base import BaseSettings
from backend.configs.database import DatabaseSettings
from backend.configs.store import StoreSettings


class Settings(BaseSettings):
    """Root settings: shared fields plus one attribute per config section."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Build the process-wide Settings once and reuse it.

    create_app falls back to this when it is not given settings
    explicitly; request handlers read the app's own copy from app.state.

    Returns:
        Settings: Cached settings built from the environment and .env
    """
    return Settings()
