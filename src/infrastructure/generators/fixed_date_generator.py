"""Frozen clock adapter.

Example:
    >>> clock = FixedDateGenerator()
    >>> clock.now()
    datetime.datetime(2024, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
"""

from datetime import UTC, datetime

DEFAULT_FIXED_NOW = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)


class FixedDateGenerator:
    """Always return the same instant.

    Args:
        value: Instant to return. Must be timezone-aware.

    Raises:
        ValueError: If value is naive.
    """

    def __init__(self, value: datetime = DEFAULT_FIXED_NOW) -> None:
        if value.tzinfo is None:
            raise ValueError("FixedDateGenerator requires a timezone-aware datetime")
        self._value = value

    def now(self) -> datetime:
        return self._value
