"""
Users router package.

Exports the router for user management endpoints.
"""

from .users_router import router

__all__ = ["router"]
