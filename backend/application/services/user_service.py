"""
User service orchestrator.

Owns the business rules that span more than one record: email uniqueness
and existence-before-mutate. Composes repository calls only; knows
nothing about the store or about HTTP, and does no error translation of
its own.

Email uniqueness is check-then-write and therefore best-effort: two
concurrent requests with the same new email can both pass the check.
Closing that gap needs a conditional write keyed on the email (e.g. a
document id derived from the normalized address).

Dependencies: backend.boundary.repositories, backend.models.user
System role: User use case orchestration
"""

import logging

from backend.boundary.repositories.user_repository import UserRepository
from backend.core.exceptions import ConflictError
from backend.models.user import (
    CreateUserRequest,
    PaginateUsersQuery,
    UpdateUserRequest,
    User,
    UserPage,
)
from backend.observability.log_utils import mask_email

logger = logging.getLogger(__name__)


class UserService:
    """User service orchestrator."""

    def __init__(self, repository: UserRepository) -> None:
        """
        Initialize user service with a repository.

        Args:
            repository: User repository
        """
        self.repository = repository

    async def create(self, request: CreateUserRequest) -> User:
        """
        Create a user after checking the email is free.

        Args:
            request: Validated create request

        Returns:
            User: Created user

        Raises:
            ConflictError: If another record already holds the email
        """
        existing = await self.repository.find_by_email(request.email)
        if existing is not None:
            logger.warning(
                "Email already in use",
                extra={"email": mask_email(request.email), "existing_user_id": existing.id},
            )
            raise ConflictError(request.email)

        user = await self.repository.create(request)
        logger.info("User created", extra={"user_id": user.id, "role": user.role.value})
        return user

    async def find_all(self, query: PaginateUsersQuery) -> UserPage:
        """
        Return one page of users.

        Args:
            query: Pagination filters

        Returns:
            UserPage: Records and pagination metadata
        """
        return await self.repository.list(query)

    async def find_one(self, user_id: str) -> User:
        """
        Get user by id.

        Raises:
            NotFoundError: If the user does not exist
        """
        return await self.repository.find_by_id(user_id)

    async def update(self, user_id: str, request: UpdateUserRequest) -> User:
        """
        Partially update a user.

        The existence check runs before anything else so a missing id
        always surfaces as NotFoundError. A new email must not belong to a
        different record; keeping one's own email is allowed.

        Args:
            user_id: User id
            request: Partial update request

        Returns:
            User: Updated user

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another record
        """
        await self.repository.find_by_id(user_id)

        if request.email:
            existing = await self.repository.find_by_email(request.email)
            if existing is not None and existing.id != user_id:
                logger.warning(
                    "Email already in use",
                    extra={"email": mask_email(request.email), "existing_user_id": existing.id, "user_id": user_id},
                )
                raise ConflictError(request.email)

        user = await self.repository.update(user_id, request)
        logger.info(
            "User updated",
            extra={"user_id": user_id, "updates": sorted(request.changes())},
        )
        return user

    async def remove(self, user_id: str) -> None:
        """
        Delete a user permanently.

        Raises:
            NotFoundError: If the user does not exist
        """
        await self.repository.remove(user_id)
        logger.info("User removed", extra={"user_id": user_id})
