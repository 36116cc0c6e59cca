"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.user import User
from src.domain.entities.webinar import (
    MAX_SEATS,
    MIN_LEAD_TIME,
    MIN_SEATS,
    Webinar,
    WebinarProps,
    assume_utc,
)

__all__ = [
    "MAX_SEATS",
    "MIN_LEAD_TIME",
    "MIN_SEATS",
    "User",
    "Webinar",
    "WebinarProps",
    "assume_utc",
]
