"""
Dependency injection container.

Factory functions for FastAPI dependencies. The document store is built
once by the application lifespan and kept on app.state; repositories and
services are cheap wrappers created per request around that instance.

Dependencies: fastapi, backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request

from backend.application.services.user_service import UserService
from backend.boundary.repositories.user_repository import UserRepository
from backend.boundary.store.document_store import DocumentStore
from backend.configs import Settings, get_settings


def get_settings_dependency(request: Request) -> Settings:
    """
    Get the settings the application was created with.

    Falls back to the process-wide settings when the app carries none.
    """
    return getattr(request.app.state, "settings", None) or get_settings()


def get_document_store(request: Request) -> DocumentStore:
    """
    Get the document store built at startup.

    Args:
        request: Current request (gives access to app.state)

    Returns:
        DocumentStore: Shared store instance

    Raises:
        RuntimeError: If the application lifespan has not created the store
    """
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        raise RuntimeError("Document store is not initialised; is the lifespan running?")
    return store


def get_user_repository(
    store: DocumentStore = Depends(get_document_store),
) -> UserRepository:
    """
    Get user repository instance.

    Args:
        store: Document store (injected via Depends)

    Returns:
        UserRepository: Repository over the users collection
    """
    return UserRepository(store=store)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """
    Get user service instance.

    Args:
        repository: User repository (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(repository=repository)
