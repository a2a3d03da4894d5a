"""
User error handling utilities.

Provides a decorator that turns the service error taxonomy into
HTTPExceptions for user endpoints, logging client errors at WARNING and
server faults with their stack at ERROR.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    ConflictError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
)
from backend.observability.log_utils import mask_email

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_DETAIL = "Internal server error"


def handle_user_errors(func: F) -> F:
    """
    Decorator to handle user-related errors and transform them into HTTPExceptions.

    - NotFoundError -> 404
    - ConflictError -> 409
    - InvalidArgumentError -> 400
    - InternalError and anything unexpected -> 500 with a generic message
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning("User not found", extra={"user_id": e.user_id})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ConflictError as e:
            logger.warning("Email conflict", extra={"email": mask_email(e.email)})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except InvalidArgumentError as e:
            logger.warning("Invalid user request", extra={"field": e.field, "error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except InternalError as e:
            logger.error("User operation failed", extra={"operation": e.context})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL,
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in user operation",
                extra={"error_type": type(e).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL,
            )

    return wrapper  # type: ignore
