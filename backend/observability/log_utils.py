"""
Structured logging helpers.

Values passed as structured context are flattened to short strings so a
log line never fails to render and never carries an unbounded payload.
Email addresses are masked before they reach a log record.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import enum
import logging
from typing import Any

MAX_VALUE_LENGTH = 500


def mask_email(email: str | None) -> str:
    """
    Mask the local part of an email address for logging.

    "ada.lovelace@example.com" -> "a***@example.com"
    """
    if not email:
        return "None"
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Convert a context value to a bounded string.

    Enums log their value; collections log their size rather than their
    contents.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, enum.Enum):
            val_str = str(value.value)
        elif isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple, set, frozenset)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with flattened structured context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Structured fields attached to the record
    """
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception at ERROR with its traceback and structured context.

    error_type and error_msg are added to the context; the message itself
    is kept for the log only and never returned to a caller.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Structured fields attached to the record
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
