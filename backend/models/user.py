"""
User domain models and schemas.

The User entity returned by the repository and service layers, plus the
request schemas for create, update and paginated listing.

Dependencies: pydantic, email-validator
System role: User API contracts and domain entity
"""

import enum
from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from backend.models.common import CamelModel, PageMeta

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


class UserRole(str, enum.Enum):
    """Roles a user record can hold."""

    ADMIN = "admin"
    USER = "user"
    MODERATOR = "moderator"


class User(CamelModel):
    """
    User record entity.

    Attributes:
        id: Opaque store-assigned id
        name: Display name
        email: Email address, unique across live records
        role: Assigned role
        is_active: Whether the account is active
        created_at: Store timestamp of creation (UTC)
        updated_at: Store timestamp of the last write (UTC)
    """

    id: str
    name: str
    email: str
    role: UserRole = UserRole.USER
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class CreateUserRequest(CamelModel):
    """Request schema for creating a user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    role: UserRole = Field(default=UserRole.USER, description="Defaults to user")


class UpdateUserRequest(CamelModel):
    """Request schema for partially updating a user; unset fields are left alone."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name: str | None = Field(None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr | None = None
    role: UserRole | None = None
    is_active: bool | None = None

    def changes(self) -> dict:
        """Return the explicitly provided fields keyed by their storage names."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_unset=True,
            exclude_none=True,
        )


class PaginateUsersQuery(CamelModel):
    """List filters for keyset pagination."""

    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    cursor: str | None = Field(default=None, description="Id of the last record of the previous page")
    role: UserRole | None = None


class UserPage(CamelModel):
    """One page of users with pagination metadata."""

    data: list[User]
    meta: PageMeta
