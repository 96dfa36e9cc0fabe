"""System router for non-versioned application endpoints.

Provides root and health endpoints. These endpoints are lightweight and
side-effect free to support health checks and basic diagnostics.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.core.config import Settings, get_settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}
