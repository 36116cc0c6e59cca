"""User domain entity.

The acting identity behind a command. Authentication happens outside this
service: by the time a command is built the caller has already been resolved
to a user handle.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class User:
    """Resolved caller identity.

    Attributes:
        id: User identifier (compared against ``Webinar.organizer_id``).
        email: Contact address, when known.

    Example:
        >>> alice = User(id="alice", email="alice@example.com")
    """

    id: str
    email: str | None = None
