"""In-memory webinar repository.

Process-local implementation of the WebinarRepository protocol, used by unit
tests and by the application when no database is wanted.

Entities are copied on the way in and on the way out, so callers can never
mutate stored state without going through update().
"""

from collections.abc import Iterable

from src.domain.entities.webinar import Webinar


class WebinarAlreadyExistsError(Exception):
    """Raised by create() when the id is already stored."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(f"Webinar {webinar_id!r} already exists")
        self.webinar_id = webinar_id


class InMemoryWebinarRepository:
    """Dictionary-backed WebinarRepository.

    Not shared across processes. Operations contain no awaits between read
    and write, so each call is atomic on a single event loop.

    Example:
        >>> repo = InMemoryWebinarRepository([existing])
        >>> await repo.find_by_id(existing.id)
    """

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        self._webinars: dict[str, Webinar] = {
            webinar.id: webinar.copy() for webinar in webinars
        }

    @property
    def database(self) -> list[Webinar]:
        """Copies of every stored webinar, in insertion order."""
        return [webinar.copy() for webinar in self._webinars.values()]

    async def create(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            raise WebinarAlreadyExistsError(webinar.id)
        self._webinars[webinar.id] = webinar.copy()

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        return self.find_by_id_sync(webinar_id)

    async def update(self, webinar: Webinar) -> None:
        # Unknown ids are stored as-is; handlers always load before updating.
        self._webinars[webinar.id] = webinar.copy()

    def find_by_id_sync(self, webinar_id: str) -> Webinar | None:
        """Synchronous lookup for test assertions."""
        webinar = self._webinars.get(webinar_id)
        return webinar.copy() if webinar is not None else None
