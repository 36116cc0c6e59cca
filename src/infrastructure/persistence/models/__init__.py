"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and should not be imported by the domain layer.

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.webinar import Webinar as WebinarModel

__all__ = [
    "WebinarModel",
]
