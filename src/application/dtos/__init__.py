"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command handlers. They transfer data
from the application layer to the presentation layer.

Usage:
    from src.application.dtos import OrganizeWebinarResult

Note:
    DTOs are NOT the same as API schemas (Pydantic models in src/schemas).
"""

from src.application.dtos.webinar_dtos import OrganizeWebinarResult

__all__ = [
    "OrganizeWebinarResult",
]
