"""WebinarRepository protocol for webinar persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from src.domain.entities.webinar import Webinar


class WebinarRepository(Protocol):
    """Webinar repository protocol (port).

    Every operation works against one logical store keyed by webinar id.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        create: Persist a new webinar
        find_by_id: Retrieve webinar by ID
        update: Persist the full current state of an existing webinar

    Concurrency:
        Handlers read with find_by_id and write with update. Two concurrent
        writers for the same id can overwrite each other unless the adapter
        provides compare-and-swap or transactional isolation.
    """

    async def create(self, webinar: Webinar) -> None:
        """Persist a new webinar.

        Args:
            webinar: Webinar entity to store.

        Raises:
            Exception: Adapter-specific conflict error when the id already
                exists. Handlers never rely on this.
        """
        ...

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Find webinar by ID.

        Args:
            webinar_id: Webinar's unique identifier.

        Returns:
            A fresh Webinar instance if found, None otherwise.
        """
        ...

    async def update(self, webinar: Webinar) -> None:
        """Persist the full current state of an existing webinar.

        Callers must have loaded the webinar first; behavior for unknown ids
        is adapter-defined.

        Args:
            webinar: Webinar entity carrying the new state.
        """
        ...
