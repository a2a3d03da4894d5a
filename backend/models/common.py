"""
Common response models and utilities.

Generic response envelopes, pagination metadata and error schemas.
Field names are camelCase on the wire.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class CamelModel(BaseModel):
    """Base model serialising snake_case attributes as camelCase fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageMeta(CamelModel):
    """Keyset pagination metadata."""

    limit: int
    has_next_page: bool = False
    next_cursor: str | None = None


class SuccessResponse(CamelModel, Generic[T]):
    """Generic success envelope."""

    success: bool = True
    data: T
    timestamp: str = Field(default_factory=_utc_timestamp)


class PaginatedResponse(CamelModel, Generic[T]):
    """Paginated success envelope; meta sits beside data."""

    success: bool = True
    data: list[T]
    meta: PageMeta
    timestamp: str = Field(default_factory=_utc_timestamp)


class ErrorResponse(CamelModel):
    """Error envelope."""

    success: bool = False
    status_code: int = Field(description="HTTP status code")
    error: str = Field(description="HTTP reason phrase")
    message: str | list = Field(description="Error message or validation errors")
    path: str = Field(description="Request path")
    timestamp: str = Field(default_factory=_utc_timestamp)
