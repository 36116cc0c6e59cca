"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import WebinarCreateRequest, WebinarCreateResponse
"""

from src.schemas.webinar_schemas import (
    WebinarCreateRequest,
    WebinarCreateResponse,
    WebinarSeatsUpdateRequest,
    WebinarSeatsUpdateResponse,
)

__all__ = [
    "WebinarCreateRequest",
    "WebinarCreateResponse",
    "WebinarSeatsUpdateRequest",
    "WebinarSeatsUpdateResponse",
]
