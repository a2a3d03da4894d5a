"""
Failure-normalization boundary for repository operations.

Every repository operation runs its store interaction through
run_guarded. Errors from the service taxonomy pass through untouched;
anything else is logged with the operation context and replaced by a
generic InternalError so no storage-engine detail reaches the caller.

Dependencies: backend.core.exceptions, backend.observability
System role: Error normalization between repositories and the store
"""

import logging
from typing import Awaitable, Callable, TypeVar

from backend.core.exceptions import InternalError, UserRecordsException
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_guarded(
    context: str,
    operation: Callable[[], Awaitable[T]],
    **log_context,
) -> T:
    """
    Await an operation, collapsing unexpected failures into InternalError.

    Args:
        context: Human-readable description of the operation, used as the
            log message and as the InternalError message
        operation: Zero-argument coroutine function performing the work
        **log_context: Extra structured fields for the failure log line

    Returns:
        Whatever the operation returns

    Raises:
        UserRecordsException: Domain errors raised by the operation, unchanged
        InternalError: For every other exception
    """
    try:
        return await operation()
    except UserRecordsException:
        raise
    except Exception as exc:
        log_exception_with_context(logger, context, exc, operation=context, **log_context)
        raise InternalError(context) from exc
