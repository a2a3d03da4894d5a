"""
Test suite for UserService.

Orchestration rules are checked against an AsyncMock repository; the
end-to-end uniqueness rules are checked against the in-memory store.

System role: Verification of user use cases
"""

from unittest.mock import AsyncMock

import pytest

from backend.application.services.user_service import UserService
from backend.core.exceptions import ConflictError, NotFoundError
from backend.models.common import PageMeta
from backend.models.user import (
    CreateUserRequest,
    PaginateUsersQuery,
    UpdateUserRequest,
    UserPage,
)


@pytest.fixture
def mock_repository() -> AsyncMock:
    """Provide a mocked UserRepository."""
    return AsyncMock()


@pytest.fixture
def service(mock_repository) -> UserService:
    """Provide a UserService over the mocked repository."""
    return UserService(repository=mock_repository)


class TestUserServiceCreate:
    """Test suite for UserService.create()."""

    async def test_create_with_fresh_email(self, service, mock_repository, make_user, sample_create_request) -> None:
        """Test create writes the user when the email is free."""
        # Arrange
        user = make_user(email="ada@example.com")
        mock_repository.find_by_email.return_value = None
        mock_repository.create.return_value = user

        # Act
        result = await service.create(sample_create_request)

        # Assert
        assert result == user
        mock_repository.find_by_email.assert_awaited_once_with("ada@example.com")
        mock_repository.create.assert_awaited_once_with(sample_create_request)

    async def test_create_with_taken_email_raises_conflict(
        self, service, mock_repository, make_user, sample_create_request
    ) -> None:
        """Test create refuses an email another record holds."""
        # Arrange
        mock_repository.find_by_email.return_value = make_user(email="ada@example.com")

        # Act / Assert
        with pytest.raises(ConflictError) as exc_info:
            await service.create(sample_create_request)

        assert exc_info.value.email == "ada@example.com"
        mock_repository.create.assert_not_awaited()


class TestUserServiceQueries:
    """Test suite for find_all/find_one delegation."""

    async def test_find_all_delegates_to_repository(self, service, mock_repository, make_user) -> None:
        """Test find_all returns the repository page untouched."""
        # Arrange
        page = UserPage(data=[make_user()], meta=PageMeta(limit=10))
        mock_repository.list.return_value = page
        query = PaginateUsersQuery(limit=10)

        # Act
        result = await service.find_all(query)

        # Assert
        assert result is page
        mock_repository.list.assert_awaited_once_with(query)

    async def test_find_one_propagates_not_found(self, service, mock_repository) -> None:
        """Test NotFoundError from the repository propagates unchanged."""
        error = NotFoundError("u1")
        mock_repository.find_by_id.side_effect = error

        with pytest.raises(NotFoundError) as exc_info:
            await service.find_one("u1")

        assert exc_info.value is error


class TestUserServiceUpdate:
    """Test suite for UserService.update()."""

    async def test_update_missing_user_raises_not_found_first(self, service, mock_repository) -> None:
        """Test the existence check runs before the email check."""
        # Arrange
        mock_repository.find_by_id.side_effect = NotFoundError("u1")

        # Act / Assert
        with pytest.raises(NotFoundError):
            await service.update("u1", UpdateUserRequest(email="taken@example.com"))

        mock_repository.find_by_email.assert_not_awaited()
        mock_repository.update.assert_not_awaited()

    async def test_update_to_email_of_other_user_raises_conflict(
        self, service, mock_repository, make_user
    ) -> None:
        """Test changing to another record's email is refused."""
        # Arrange
        mock_repository.find_by_id.return_value = make_user(id="u1")
        mock_repository.find_by_email.return_value = make_user(id="u2", email="taken@example.com")

        # Act / Assert
        with pytest.raises(ConflictError):
            await service.update("u1", UpdateUserRequest(email="taken@example.com"))

        mock_repository.update.assert_not_awaited()

    async def test_update_keeping_own_email_succeeds(self, service, mock_repository, make_user) -> None:
        """Test re-submitting one's own email is not a conflict."""
        # Arrange
        own = make_user(id="u1", email="me@example.com")
        mock_repository.find_by_id.return_value = own
        mock_repository.find_by_email.return_value = own
        mock_repository.update.return_value = own

        # Act
        result = await service.update("u1", UpdateUserRequest(email="me@example.com"))

        # Assert
        assert result == own
        mock_repository.update.assert_awaited_once()

    async def test_update_without_email_skips_email_lookup(self, service, mock_repository, make_user) -> None:
        """Test updates that do not touch email never query by email."""
        # Arrange
        mock_repository.find_by_id.return_value = make_user(id="u1")
        mock_repository.update.return_value = make_user(id="u1", name="Renamed")

        # Act
        result = await service.update("u1", UpdateUserRequest(name="Renamed"))

        # Assert
        assert result.name == "Renamed"
        mock_repository.find_by_email.assert_not_awaited()


class TestUserServiceIntegration:
    """End-to-end use cases against the in-memory store."""

    async def test_create_then_find_one(self, user_service, sample_create_request) -> None:
        """Test a created user resolves through find_one."""
        created = await user_service.create(sample_create_request)

        found = await user_service.find_one(created.id)

        assert found == created

    async def test_duplicate_email_conflicts(self, user_service, sample_create_request) -> None:
        """Test a second user with the same email is refused."""
        await user_service.create(sample_create_request)

        with pytest.raises(ConflictError):
            await user_service.create(CreateUserRequest(name="Other Ada", email="ada@example.com"))

    async def test_update_with_own_email(self, user_service, sample_create_request) -> None:
        """Test updating a user with its current email succeeds."""
        created = await user_service.create(sample_create_request)

        updated = await user_service.update(
            created.id, UpdateUserRequest(name="Countess Lovelace", email="ada@example.com")
        )

        assert updated.name == "Countess Lovelace"
        assert updated.email == "ada@example.com"

    async def test_update_to_taken_email_conflicts(self, user_service, sample_create_request) -> None:
        """Test moving to an email another user holds is refused."""
        await user_service.create(sample_create_request)
        other = await user_service.create(CreateUserRequest(name="Grace Hopper", email="grace@example.com"))

        with pytest.raises(ConflictError):
            await user_service.update(other.id, UpdateUserRequest(email="ada@example.com"))

    async def test_remove_then_find_one_raises_not_found(self, user_service, sample_create_request) -> None:
        """Test a removed user is gone."""
        created = await user_service.create(sample_create_request)

        await user_service.remove(created.id)

        with pytest.raises(NotFoundError):
            await user_service.find_one(created.id)

    async def test_remove_missing_raises_not_found(self, user_service) -> None:
        """Test removing an unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await user_service.remove("missing")

    async def test_email_is_free_again_after_remove(self, user_service, sample_create_request) -> None:
        """Test deleting a user releases its email."""
        created = await user_service.create(sample_create_request)
        await user_service.remove(created.id)

        again = await user_service.create(sample_create_request)

        assert again.id != created.id
