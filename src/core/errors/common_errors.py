"""Common error classes shared by every resource.

Error Types:
- ValidationError: A value breaks a business rule (seats, dates)
- NotFoundError: The requested resource does not exist
- AuthorizationError: The caller may not act on the resource

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.WEBINAR_TOO_MANY_SEATS,
        message="Webinar must have at most 1000 seats",
        field="seats",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Business rule validation failure.

    Attributes:
        field: Name of the offending field, if any.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (e.g. "Webinar").
        resource_id: ID that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """The acting user is not allowed to perform the operation.

    Attributes:
        required_permission: Permission or role that was required.
    """

    required_permission: str | None = None
