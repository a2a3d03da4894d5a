"""
Role capability check.

Routes declare the roles allowed to call them by adding
Depends(require_roles(...)). The caller role is read from a request
header; establishing who the caller is belongs to whatever sits in front
of this service.

Dependencies: fastapi, backend.models.user
System role: Transport-level role gating
"""

import logging
from typing import Callable, Iterable

from fastapi import Depends, HTTPException, Request, status

from backend.api.deps.dependencies import get_settings_dependency
from backend.configs import Settings
from backend.models.user import UserRole
from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def ensure_caller_role(caller_role: str | None, required_roles: Iterable[UserRole]) -> UserRole | None:
    """
    Check a caller role against a set of required roles.

    Args:
        caller_role: Raw role value supplied by the caller (None if absent)
        required_roles: Roles allowed through; empty means the route is open

    Returns:
        The parsed caller role, or None for open routes

    Raises:
        HTTPException(403): No role supplied, unknown role, or role not allowed
    """
    required = frozenset(required_roles)
    if not required:
        return None

    if not caller_role:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Authentication required")

    try:
        role = UserRole(caller_role.strip().lower())
    except ValueError:
        role = None

    if role is None or role not in required:
        allowed = ", ".join(sorted(r.value for r in required))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Requires one of the following roles: {allowed}",
        )
    return role


def require_roles(*roles: UserRole) -> Callable:
    """
    Build a FastAPI dependency that admits only the given roles.

    Usage:
        @router.delete("/{user_id}", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """

    def check_role(
        request: Request,
        settings: Settings = Depends(get_settings_dependency),
    ) -> UserRole | None:
        caller_role = request.headers.get(settings.api.role_header)
        try:
            return ensure_caller_role(caller_role, roles)
        except HTTPException:
            log_with_context(
                logger,
                logging.WARNING,
                "Role check failed",
                caller_role=caller_role,
                required_roles=", ".join(r.value for r in roles),
                path=request.url.path,
            )
            raise

    return check_role
