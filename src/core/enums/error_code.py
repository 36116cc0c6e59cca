"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Generic errors shared by all resources
- Webinar rule violations (the closed set returned by webinar handlers)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Generic errors
    VALIDATION_FAILED = "validation_failed"

    # Webinar errors
    WEBINAR_DATES_TOO_SOON = "webinar_dates_too_soon"
    WEBINAR_TOO_MANY_SEATS = "webinar_too_many_seats"
    WEBINAR_NOT_ENOUGH_SEATS = "webinar_not_enough_seats"
    WEBINAR_REDUCE_SEATS = "webinar_reduce_seats"
    WEBINAR_NOT_FOUND = "webinar_not_found"
    WEBINAR_NOT_ORGANIZER = "webinar_not_organizer"
