"""SQLAlchemy persistence: declarative base, Database manager, webinar table.

Repository adapters live in ``repositories`` (SQLAlchemy and in-memory).
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
