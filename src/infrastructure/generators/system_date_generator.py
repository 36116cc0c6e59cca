"""System clock adapter."""

from datetime import UTC, datetime


class SystemDateGenerator:
    """Current time from the system clock, always timezone-aware UTC.

    Implements DateGeneratorProtocol.
    """

    def now(self) -> datetime:
        return datetime.now(UTC)
