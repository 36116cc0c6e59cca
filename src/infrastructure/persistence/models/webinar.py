"""Webinar database model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class Webinar(BaseModel):
    """Webinar model.

    Fields:
        id: String primary key (from BaseModel)
        created_at: Timestamp when row was inserted (from BaseModel)
        updated_at: Timestamp when row was last modified (from BaseModel)
        organizer_id: Owning user's identifier
        title: Webinar title
        start_date: Scheduled start (UTC)
        end_date: Scheduled end (UTC)
        seats: Seat capacity

    Indexes:
        - idx_webinars_organizer: (organizer_id) - list an organizer's webinars
    """

    __tablename__ = "webinars"

    organizer_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Identifier of the organizing user",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Free text, unbounded",
    )

    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    seats: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Seat capacity (1-1000, enforced by the application)",
    )

    __table_args__ = (Index("idx_webinars_organizer", "organizer_id"),)
