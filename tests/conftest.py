"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite document store, repository/service wiring,
sample requests and a User factory
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.application.services.user_service import UserService
from backend.boundary.db.create_tables import create_all_tables, drop_all_tables
from backend.boundary.repositories.user_repository import UserRepository
from backend.boundary.store.sql_document_store import SqlDocumentStore
from backend.models.user import CreateUserRequest, User, UserRole


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with the schema in place.

    Yields:
        AsyncEngine: Engine sharing one connection so the database survives across sessions
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await create_all_tables(engine)

    yield engine

    # Cleanup
    await drop_all_tables(engine)

    await engine.dispose()


@pytest.fixture
def session_factory(test_async_engine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(test_async_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
def document_store(session_factory) -> SqlDocumentStore:
    """Document store over the users collection."""
    return SqlDocumentStore(session_factory=session_factory, collection="users")


@pytest.fixture
def user_repository(document_store) -> UserRepository:
    """User repository backed by the in-memory store."""
    return UserRepository(store=document_store)


@pytest.fixture
def user_service(user_repository) -> UserService:
    """User service backed by the in-memory store."""
    return UserService(repository=user_repository)


@pytest.fixture
def sample_create_request() -> CreateUserRequest:
    """Provide a valid create request."""
    return CreateUserRequest(name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def make_user():
    """
    Factory for User entities used as mock return values.

    Returns:
        Callable[..., User]: Builds a User, overriding any field by keyword
    """

    def _make_user(**overrides: Any) -> User:
        now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        fields: dict[str, Any] = {
            "id": uuid4().hex,
            "name": "Test User",
            "email": "test@example.com",
            "role": UserRole.USER,
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }
        fields.update(overrides)
        return User(**fields)

    return _make_user
