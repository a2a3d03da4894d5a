"""
Repositories: domain-facing persistence over the document store.

Usage:
    from backend.boundary.repositories import UserRepository

    repository = UserRepository(store)
    user = await repository.find_by_id(user_id)
"""

from backend.boundary.repositories.error_boundary import run_guarded
from backend.boundary.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
    "run_guarded",
]
