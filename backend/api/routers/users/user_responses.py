"""
User response mapping utilities.

Wraps entities and pages in the response envelopes.

Dependencies: backend.models
System role: User response transformation
"""

from backend.models.common import PaginatedResponse, SuccessResponse
from backend.models.user import User, UserPage


def map_user_to_response(user: User) -> SuccessResponse[User]:
    """Wrap a single user in the success envelope."""
    return SuccessResponse[User](data=user)


def map_page_to_response(page: UserPage) -> PaginatedResponse[User]:
    """
    Wrap a page of users in the paginated envelope.

    meta sits beside data instead of being nested under it.
    """
    return PaginatedResponse[User](data=page.data, meta=page.meta)
