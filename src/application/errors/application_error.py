"""Application layer error types.

Application-level errors wrap domain errors with the category the presentation
layer needs to choose an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Webinar not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     webinar_error.not_organizer()
        ... )
        >>> error.code
        <ApplicationErrorCode.FORBIDDEN: 'forbidden'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Wrap a domain error, picking the code from its error class.

        Args:
            error: Domain error returned in a Failure.

        Returns:
            ApplicationError carrying the domain error and its message.
        """
        match error:
            case ValidationError():
                code = ApplicationErrorCode.COMMAND_VALIDATION_FAILED
            case NotFoundError():
                code = ApplicationErrorCode.NOT_FOUND
            case AuthorizationError():
                code = ApplicationErrorCode.FORBIDDEN
            case _:
                code = ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        return cls(
            code=code,
            message=error.message,
            domain_error=error,
            details={"error_code": error.code.value},
        )
