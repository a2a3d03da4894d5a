"""
Exception hierarchy for the user records service.

Provides the small, stable error taxonomy that is allowed to escape the
repository and service layers. Store-specific failures never leave the
repository boundary; they are collapsed into InternalError there.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class UserRecordsException(Exception):
    """Base exception for all user records errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(UserRecordsException):
    """Raised when a referenced record id does not exist."""

    def __init__(self, user_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            user_id: ID of the missing record
            details: Additional context
        """
        details = dict(details or {})
        details["user_id"] = user_id
        self.user_id = user_id
        super().__init__(f'User with id "{user_id}" not found', details)


class ConflictError(UserRecordsException):
    """Raised when an email address is already used by another record."""

    def __init__(self, email: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize conflict error.

        Args:
            email: The email address that is already taken
            details: Additional context
        """
        details = dict(details or {})
        details["email"] = email
        self.email = email
        super().__init__(f'Email "{email}" is already in use', details)


class InvalidArgumentError(UserRecordsException):
    """Raised for malformed ids or cursors and out-of-range pagination."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            field: Name of the offending argument
            details: Additional context
        """
        details = dict(details or {})
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class InternalError(UserRecordsException):
    """Raised when an unexpected store or mapping failure occurs."""

    def __init__(self, context: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize internal error.

        Args:
            context: Description of the operation that failed
            details: Additional context (never the raw store error)
        """
        details = dict(details or {})
        details["operation"] = context
        self.context = context
        super().__init__(context, details)
