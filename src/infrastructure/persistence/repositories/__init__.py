"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.in_memory_webinar_repository import (
    InMemoryWebinarRepository,
    WebinarAlreadyExistsError,
)
from src.infrastructure.persistence.repositories.webinar_repository import (
    WebinarRepository,
)

__all__ = [
    "InMemoryWebinarRepository",
    "WebinarAlreadyExistsError",
    "WebinarRepository",
]
