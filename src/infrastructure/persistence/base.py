"""Declarative base for the webinar tables.

Every table gets an application-assigned string id plus created_at/updated_at
audit timestamps maintained by the database.

Following hexagonal architecture:
- Models here are database rows, not domain entities
- Repositories map rows to/from entities; entities never import this module

Usage:
    class Webinar(BaseModel):
        __tablename__ = "webinars"
        title: Mapped[str]

Note:
    Ids come from the domain's id generator (UUIDv7 in production, "id-1"
    style in tests), so the primary key has no database-side default.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Declarative base shared by all tables.

    Columns:
        id: Opaque string primary key (assigned by the application)
        created_at: Set by the database on INSERT
        updated_at: Refreshed by the database on every UPDATE
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id!r})>"
