"""DateGeneratorProtocol - source of the current time.

Temporal business rules (the webinar lead time) read "now" through this port
so they can be tested without depending on the wall clock.
"""

from datetime import datetime
from typing import Protocol


class DateGeneratorProtocol(Protocol):
    """Protocol for reading the current time."""

    def now(self) -> datetime:
        """Return the current instant.

        Returns:
            Timezone-aware datetime.
        """
        ...
