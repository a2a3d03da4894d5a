"""
Application-level exception handlers.

Renders HTTP errors, request validation failures, throttled requests and
unhandled exceptions in the error envelope
{success, statusCode, error, message, path, timestamp}.

Dependencies: fastapi, starlette, slowapi, backend.models.common
System role: Error response rendering
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def build_error_response(request: Request, status_code: int, message: str | list) -> JSONResponse:
    """
    Build a JSON error envelope for the current request.

    Args:
        request: Request that failed
        status_code: HTTP status to return
        message: Human readable message, or a list of validation messages

    Returns:
        JSONResponse: Serialized ErrorResponse with camelCase keys
    """
    body = ErrorResponse(
        status_code=status_code,
        error=_reason_phrase(status_code),
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    """Flatten pydantic errors into "field: message" strings."""
    messages = []
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        location = [str(part) for part in error.get("loc", ())[1:]]
        prefix = ".".join(location)
        messages.append(f"{prefix}: {error['msg']}" if prefix else error["msg"])
    return messages


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to the application."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            level,
            "HTTP error response",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        headers = getattr(exc, "headers", None)
        response = build_error_response(request, exc.status_code, exc.detail)
        if headers:
            response.headers.update(headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        messages = format_validation_errors(exc)
        logger.warning(
            "Request validation failed",
            extra={"path": request.url.path, "errors": messages},
        )
        return build_error_response(request, status.HTTP_400_BAD_REQUEST, messages)

    @app.exception_handler(RateLimitExceeded)
    def handle_rate_limit_exceeded(request: Request, exc: RateLimitExceeded):
        logger.warning(
            "Rate limit exceeded",
            extra={"path": request.url.path, "limit": exc.detail},
        )
        return build_error_response(
            request,
            status.HTTP_429_TOO_MANY_REQUESTS,
            "Too many requests, try again later",
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return build_error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
        )
