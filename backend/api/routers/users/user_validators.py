"""
User request validation utilities.

Checks not covered by the Pydantic request models: document id shape,
pagination ranges and non-empty updates. Every failure raises
InvalidArgumentError so it maps to 400 like the core's own checks.

Dependencies: backend.models.user, backend.core.exceptions
System role: User request validation
"""

import re

from backend.core.exceptions import InvalidArgumentError
from backend.models.user import (
    MAX_PAGE_LIMIT,
    PaginateUsersQuery,
    UpdateUserRequest,
    UserRole,
)

# 1-128 characters, no whitespace, no forward slash
DOCUMENT_ID_PATTERN = re.compile(r"^[^\s/]{1,128}$")


def validate_document_id(value: str, field: str = "id") -> str:
    """
    Validate that a value looks like a document id.

    Args:
        value: Candidate id
        field: Argument name reported on failure

    Returns:
        str: The id, unchanged

    Raises:
        InvalidArgumentError: If the value is not a valid document id
    """
    if not value or not DOCUMENT_ID_PATTERN.match(value):
        raise InvalidArgumentError(f'"{value}" is not a valid document ID', field=field)
    return value


def build_pagination_query(
    limit: int,
    cursor: str | None,
    role: UserRole | None,
) -> PaginateUsersQuery:
    """
    Validate list parameters and build the pagination query.

    Raises:
        InvalidArgumentError: If limit is out of range or cursor is malformed
    """
    if not 1 <= limit <= MAX_PAGE_LIMIT:
        raise InvalidArgumentError(
            f"limit must be between 1 and {MAX_PAGE_LIMIT}", field="limit"
        )
    if cursor is not None:
        validate_document_id(cursor, field="cursor")
    return PaginateUsersQuery(limit=limit, cursor=cursor, role=role)


def validate_user_update(request: UpdateUserRequest) -> None:
    """
    Validate user update request.

    Raises:
        InvalidArgumentError: If no field is provided
    """
    if not request.changes():
        raise InvalidArgumentError("At least one field must be provided for update")
