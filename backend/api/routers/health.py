"""
Health check API endpoint.

Routes: GET /health

Reports healthy once the lifespan has built the document store; before
that (or after shutdown) the service answers 503.

Dependencies: fastapi, pydantic
System role: Liveness/readiness probe
"""

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """Report whether the service can reach its document store."""
    if getattr(request.app.state, "document_store", None) is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="unavailable", message="Document store not initialised")
    return HealthResponse(status="healthy", message="Server Healthy")
