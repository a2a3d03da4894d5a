"""
Core domain module.

Contains the exception taxonomy shared by every layer of the service.
"""

from backend.core.exceptions import (
    UserRecordsException,
    NotFoundError,
    ConflictError,
    InvalidArgumentError,
    InternalError,
)

__all__ = [
    "UserRecordsException",
    "NotFoundError",
    "ConflictError",
    "InvalidArgumentError",
    "InternalError",
]
