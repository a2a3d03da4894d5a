"""
Request correlation IDs.

Each HTTP request runs with its own correlation ID bound in a ContextVar,
so log lines emitted anywhere below the router (service, repository,
store) can be tied back to the request that caused them.

Dependencies: contextvars
System role: Request tracing across layers
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

# Correlation IDs supplied by callers are trusted only up to this length
MAX_CORRELATION_ID_LENGTH = 128

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    """Return a fresh correlation ID."""
    return uuid.uuid4().hex


def _accept(candidate: str | None) -> str:
    if candidate:
        candidate = candidate.strip()
    if not candidate or len(candidate) > MAX_CORRELATION_ID_LENGTH:
        return new_correlation_id()
    return candidate


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    Caller-supplied values that are blank or too long are replaced by a
    generated one.

    Args:
        correlation_id: Incoming ID (e.g. from a request header)

    Returns:
        str: The ID actually bound
    """
    value = _accept(correlation_id)
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Return the bound correlation ID, or an empty string outside a request."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    """Unbind the correlation ID."""
    correlation_id_ctx.set("")


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of a block.

    The previous value is restored on exit, so nested scopes and
    concurrent requests do not leak IDs into each other.

    Usage:
        with correlation_scope(request.headers.get("X-Correlation-ID")) as cid:
            ...
    """
    value = _accept(correlation_id)
    token = correlation_id_ctx.set(value)
    try:
        yield value
    finally:
        correlation_id_ctx.reset(token)
