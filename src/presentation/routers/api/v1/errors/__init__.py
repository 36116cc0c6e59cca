"""Problem Details (RFC 7807) error bodies for the v1 API.

Handlers' domain failures go through ErrorResponseBuilder; framework errors
(HTTPException, request validation, unhandled exceptions) go through the
handlers installed by register_exception_handlers.
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
