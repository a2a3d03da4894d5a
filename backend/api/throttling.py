"""
Per-client request throttling.

Each client (by remote address) gets throttle_limit requests per route
handler within a throttle_ttl second window. Requests over the limit are
answered with 429 in the error envelope by the RateLimitExceeded handler.

Dependencies: slowapi, backend.configs
System role: Request rate limiting for the users API
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from backend.configs.api import ApiSettings


def throttle_rule(settings: ApiSettings) -> str:
    """Render the configured window as a limits string, e.g. "100 per 60 seconds"."""
    return f"{settings.throttle_limit} per {settings.throttle_ttl} seconds"


def build_limiter(settings: ApiSettings) -> Limiter:
    """
    Build the limiter for one application instance.

    Counters live in process memory, so every app built by create_app
    starts with empty windows.

    Args:
        settings: API settings carrying the throttle window and limit

    Returns:
        Limiter: Limiter applying the window to every non-exempt route
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[throttle_rule(settings)],
        key_style="endpoint",
        enabled=settings.throttle_enabled,
    )
