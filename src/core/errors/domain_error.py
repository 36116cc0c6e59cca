"""DomainError: a business failure carried as data.

Handlers return it inside ``Failure(error=...)`` instead of raising. Subclasses
in ``common_errors`` add the context each category needs (offending field,
missing resource id, required permission).
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base class for returned (never raised) errors.

    Attributes:
        code: Which rule failed, e.g. ``ErrorCode.WEBINAR_REDUCE_SEATS``.
        message: User-facing text, rendered as the Problem Details ``detail``.
        details: Extra string context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
