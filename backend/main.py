"""
FastAPI application entry point.

Dependencies: uvicorn, backend.api.main, backend.configs
System role: Server launch
"""

import uvicorn

from backend.api.main import create_app
from backend.configs import get_settings

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.debug,
    )
