"""
HTTP API configuration settings.

Bind address, CORS origins, the header that carries the caller role and
the per-client throttle window.

Dependencies: pydantic, pydantic_settings
System role: Transport layer configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """HTTP API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Bind address for uvicorn")
    port: int = Field(default=3000, description="Bind port for uvicorn")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    role_header: str = Field(
        default="X-User-Role",
        description="Request header carrying the caller role",
    )
    throttle_ttl: int = Field(
        default=60,
        gt=0,
        description="Throttle window length in seconds",
    )
    throttle_limit: int = Field(
        default=100,
        gt=0,
        description="Requests allowed per client and route within one window",
    )
    throttle_enabled: bool = Field(
        default=True,
        description="Turn per-client throttling on or off",
    )
