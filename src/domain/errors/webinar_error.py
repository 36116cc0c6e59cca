"""Webinar domain errors.

Message constants for webinar rule violations, and the factories that build
the matching DomainError for each error kind.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import webinar_error
    from src.core.result import Failure

    if cmd.seats > MAX_SEATS:
        return Failure(error=webinar_error.too_many_seats())
"""

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError, ValidationError


class WebinarError:
    """Webinar error message constants.

    Error Categories:
        - Scheduling: DATES_TOO_SOON
        - Capacity: TOO_MANY_SEATS, NOT_ENOUGH_SEATS, REDUCE_SEATS
        - Lookup/ownership: NOT_FOUND, NOT_ORGANIZER
    """

    DATES_TOO_SOON = "Webinar must be scheduled at least 3 days in advance"
    TOO_MANY_SEATS = "Webinar must have at most 1000 seats"
    NOT_ENOUGH_SEATS = "Webinar must have at least 1 seat"
    REDUCE_SEATS = "Webinar seats cannot be reduced"
    NOT_FOUND = "Webinar not found"
    NOT_ORGANIZER = "Only the organizer can change the webinar"


def dates_too_soon() -> ValidationError:
    return ValidationError(
        code=ErrorCode.WEBINAR_DATES_TOO_SOON,
        message=WebinarError.DATES_TOO_SOON,
        field="start_date",
    )


def too_many_seats() -> ValidationError:
    return ValidationError(
        code=ErrorCode.WEBINAR_TOO_MANY_SEATS,
        message=WebinarError.TOO_MANY_SEATS,
        field="seats",
    )


def not_enough_seats() -> ValidationError:
    return ValidationError(
        code=ErrorCode.WEBINAR_NOT_ENOUGH_SEATS,
        message=WebinarError.NOT_ENOUGH_SEATS,
        field="seats",
    )


def reduce_seats() -> ValidationError:
    return ValidationError(
        code=ErrorCode.WEBINAR_REDUCE_SEATS,
        message=WebinarError.REDUCE_SEATS,
        field="seats",
    )


def not_found(webinar_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.WEBINAR_NOT_FOUND,
        message=WebinarError.NOT_FOUND,
        resource_type="Webinar",
        resource_id=webinar_id,
    )


def not_organizer() -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.WEBINAR_NOT_ORGANIZER,
        message=WebinarError.NOT_ORGANIZER,
        required_permission="organizer",
    )
