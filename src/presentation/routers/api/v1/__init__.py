"""API v1 routers.

Resources:
    /api/v1/webinars    - Webinar organization and seat management
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.webinars import router as webinars_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(webinars_router)

__all__ = [
    "v1_router",
]
