"""
Document store configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Document store adapter configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class StoreSettings(BaseSettings):
    """Document store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    collection: str = Field(
        default="users",
        min_length=1,
        max_length=128,
        description="Collection holding user records",
    )
    create_tables_on_startup: bool = Field(
        default=True,
        description="Create the documents table when the API starts",
    )
