"""Domain errors package.

Usage:
    from src.domain.errors import WebinarError, webinar_error
"""

from src.domain.errors import webinar_error
from src.domain.errors.webinar_error import WebinarError

__all__ = [
    "WebinarError",
    "webinar_error",
]
