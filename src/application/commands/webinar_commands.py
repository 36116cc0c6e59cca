"""Webinar commands (CQRS write operations).

Commands represent user intent to change webinar state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities.user import User


@dataclass(frozen=True, kw_only=True)
class OrganizeWebinar:
    """Organize a new webinar.

    Attributes:
        user_id: User organizing the webinar (becomes organizer_id).
        title: Webinar title.
        seats: Requested seat capacity.
        start_date: Scheduled start (naive values are read as UTC).
        end_date: Scheduled end (naive values are read as UTC).

    Example:
        >>> command = OrganizeWebinar(
        ...     user_id="alice",
        ...     title="Webinar title",
        ...     seats=100,
        ...     start_date=datetime(2024, 1, 10, 10, tzinfo=UTC),
        ...     end_date=datetime(2024, 1, 10, 11, tzinfo=UTC),
        ... )
        >>> result = await handler.handle(command)
    """

    user_id: str
    title: str
    seats: int
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True, kw_only=True)
class ChangeSeats:
    """Change the seat capacity of an existing webinar.

    Attributes:
        user: Acting user (must be the organizer).
        webinar_id: Webinar to change.
        seats: Target seat count.

    Example:
        >>> command = ChangeSeats(user=alice, webinar_id="w1", seats=200)
        >>> result = await handler.handle(command)
    """

    user: User
    webinar_id: str
    seats: int
