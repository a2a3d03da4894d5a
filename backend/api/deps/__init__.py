"""API-specific dependencies."""

from .dependencies import (
    get_document_store,
    get_settings_dependency,
    get_user_repository,
    get_user_service,
)
from .roles import ensure_caller_role, require_roles

__all__ = [
    "get_document_store",
    "get_settings_dependency",
    "get_user_repository",
    "get_user_service",
    "ensure_caller_role",
    "require_roles",
]
