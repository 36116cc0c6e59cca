"""Webinar domain entity.

A scheduled event with a seat capacity and an owning organizer.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - State holder only: business rules are enforced by the command
      handlers before anything is persisted, so each rule has one owner
    - Snapshot of the constructed state kept for test assertions

Usage:
    webinar = Webinar(
        id="id-1",
        organizer_id="alice",
        title="Clean architecture in Python",
        start_date=datetime(2024, 1, 10, 10, tzinfo=UTC),
        end_date=datetime(2024, 1, 10, 11, tzinfo=UTC),
        seats=100,
    )
    webinar.update(seats=200)
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta

MIN_SEATS: int = 1
"""Smallest seat count a webinar may be organized with."""

MAX_SEATS: int = 1000
"""Largest seat count a webinar may ever have."""

MIN_LEAD_TIME: timedelta = timedelta(days=3)
"""Minimum interval between "now" and the start of a new webinar."""


def assume_utc(value: datetime) -> datetime:
    """Read a naive datetime as UTC; aware values are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


@dataclass(frozen=True, slots=True, kw_only=True)
class WebinarProps:
    """Immutable snapshot of a webinar's fields."""

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int


@dataclass(kw_only=True)
class Webinar:
    """Webinar entity.

    ``id`` and ``organizer_id`` are fixed for the lifetime of the webinar.
    ``seats`` is the only field changed after creation (see ``update``).

    Attributes:
        id: Opaque unique identifier.
        organizer_id: User who owns the webinar.
        title: Free-text title.
        start_date: Scheduled start (timezone-aware).
        end_date: Scheduled end (timezone-aware).
        seats: Seat capacity.
    """

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int
    _initial_state: WebinarProps = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._initial_state = self.props

    @property
    def props(self) -> WebinarProps:
        """Current state as an immutable snapshot."""
        return WebinarProps(
            id=self.id,
            organizer_id=self.organizer_id,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            seats=self.seats,
        )

    @property
    def initial_state(self) -> WebinarProps:
        """State the entity was constructed with."""
        return self._initial_state

    def update(self, *, seats: int | None = None) -> None:
        """Apply field changes in place.

        No validation happens here; callers check the business rules first.

        Args:
            seats: New seat count, or None to leave it unchanged.
        """
        if seats is not None:
            self.seats = seats

    def copy(self) -> "Webinar":
        """Return an independent copy whose initial state is the current state."""
        return replace(self)
