"""System router: unversioned operational endpoints.

    GET /              - service name, status, version
    GET /health        - liveness (no dependencies touched)
    GET /health/ready  - readiness (database reachable)
    GET /config        - sanitized settings, development only
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database
from src.infrastructure.persistence.database import Database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe for monitoring and load balancers."""
    return {"status": "healthy"}


@system_router.get("/health/ready")
async def readiness(database: Database = Depends(get_database)) -> JSONResponse:
    """Readiness probe: 503 until the database answers a trivial query."""
    if await database.check_connection():
        return JSONResponse(content={"status": "ready", "database": "ok"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable", "database": "unreachable"},
    )


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Sanitized configuration; 403 outside development."""
    if not settings.is_development:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Config endpoint only available in development"},
        )

    content: dict[str, Any] = {
        "environment": settings.environment.value,
        "debug": settings.debug,
        "log_level": settings.log_level,
        "api": {
            "name": settings.app_name,
            "version": settings.app_version,
            "base_url": settings.api_base_url,
            "v1_prefix": settings.api_v1_prefix,
        },
        "database": {"url": "<redacted>", "echo": settings.db_echo},
    }
    return JSONResponse(content=content)
