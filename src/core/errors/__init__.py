"""Domain error base class and the three error categories handlers return.

The category decides the HTTP status; the ``code`` identifies the rule.
"""

from src.core.errors.common_errors import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "AuthorizationError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
