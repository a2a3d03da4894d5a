"""
User API endpoints.

Routes:
- POST /users - Create new user (admin)
- GET /users - List users with keyset pagination
- GET /users/{id} - Get single user
- PATCH /users/{id} - Partially update user (admin, moderator)
- DELETE /users/{id} - Delete user (admin)

Dependencies: backend.application.services, backend.models
System role: User management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from backend.application.services.user_service import UserService
from backend.api.deps.dependencies import get_user_service
from backend.api.deps.roles import require_roles
from backend.models.common import PaginatedResponse, SuccessResponse
from backend.models.user import (
    DEFAULT_PAGE_LIMIT,
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserRole,
)

from .user_error_handling import handle_user_errors
from .user_validators import (
    build_pagination_query,
    validate_document_id,
    validate_user_update,
)
from .user_responses import map_page_to_response, map_user_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=SuccessResponse[User],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
@handle_user_errors
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> SuccessResponse[User]:
    """
    Create a new user record.

    Args:
        request: CreateUserRequest with name, email and optional role
        user_service: Injected UserService

    Returns:
        SuccessResponse[User]: Created user

    Raises:
        HTTPException(409): Email already in use
        HTTPException(500): Creation failed
    """
    logger.info("Creating new user", extra={"role": request.role.value})

    user = await user_service.create(request)

    logger.info("User created successfully", extra={"user_id": user.id})

    return map_user_to_response(user)


@router.get("", response_model=PaginatedResponse[User])
@handle_user_errors
async def list_users(
    limit: int = DEFAULT_PAGE_LIMIT,
    cursor: str | None = None,
    role: UserRole | None = None,
    user_service: UserService = Depends(get_user_service),
) -> PaginatedResponse[User]:
    """
    List users newest first, one page at a time.

    Args:
        limit: Page size, 1-100 (default 10)
        cursor: nextCursor from the previous page
        role: Only return users with this role
        user_service: Injected UserService

    Returns:
        PaginatedResponse[User]: Page of users with pagination meta

    Raises:
        HTTPException(400): Bad limit or cursor
        HTTPException(500): Retrieval failed
    """
    query = build_pagination_query(limit, cursor, role)

    logger.info(
        "Listing users",
        extra={"limit": query.limit, "has_cursor": query.cursor is not None},
    )

    page = await user_service.find_all(query)
    return map_page_to_response(page)


@router.get("/{user_id}", response_model=SuccessResponse[User])
@handle_user_errors
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> SuccessResponse[User]:
    """
    Get single user by ID.

    Raises:
        HTTPException(400): Malformed id
        HTTPException(404): User not found
    """
    validate_document_id(user_id)
    user = await user_service.find_one(user_id)
    return map_user_to_response(user)


@router.patch(
    "/{user_id}",
    response_model=SuccessResponse[User],
    dependencies=[Depends(require_roles(UserRole.ADMIN, UserRole.MODERATOR))],
)
@handle_user_errors
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> SuccessResponse[User]:
    """
    Partially update a user by ID.

    Args:
        user_id: User id
        request: UpdateUserRequest with the fields to change
        user_service: Injected UserService

    Returns:
        SuccessResponse[User]: Updated user

    Raises:
        HTTPException(400): Malformed id or empty update
        HTTPException(404): User not found
        HTTPException(409): Email already in use by another user
    """
    validate_document_id(user_id)
    validate_user_update(request)

    logger.info(
        "Updating user",
        extra={"user_id": user_id, "fields": sorted(request.changes())},
    )

    user = await user_service.update(user_id, request)

    logger.info("User updated successfully", extra={"user_id": user_id})

    return map_user_to_response(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_roles(UserRole.ADMIN))],
)
@handle_user_errors
async def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """
    Delete a user by ID.

    Returns:
        204 No Content on success

    Raises:
        HTTPException(400): Malformed id
        HTTPException(404): User not found
    """
    validate_document_id(user_id)

    logger.info("Deleting user", extra={"user_id": user_id})

    await user_service.remove(user_id)

    logger.info("User deleted successfully", extra={"user_id": user_id})

    return Response(status_code=status.HTTP_204_NO_CONTENT)
