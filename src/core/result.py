"""Result types for railway-oriented programming.

Business rule violations travel through the application as values instead of
exceptions. A handler returns either ``Success(value=...)`` or
``Failure(error=...)`` and the caller matches on the variant, so every error
kind has to be handled explicitly at the call site.

Usage:
    result = await handler.handle(command)
    match result:
        case Success(value=created):
            print(created.id)
        case Failure(error=ValidationError(code=ErrorCode.WEBINAR_TOO_MANY_SEATS)):
            print("too many seats")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result = Success[T] | Failure[E]
