"""Webinar repository implementation.

SQLAlchemy implementation of the WebinarRepository protocol.
Maps between Webinar domain entity and Webinar database model.

Note:
    Each write commits immediately.
"""

from datetime import UTC

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.webinar import Webinar, assume_utc
from src.infrastructure.persistence.models.webinar import Webinar as WebinarModel


class WebinarRepository:
    """SQLAlchemy implementation of WebinarRepository protocol.

    **Implementation Notes**:
    - Maps between domain entity (dataclass) and database model (SQLAlchemy)
    - Uses select() for queries (SQLAlchemy 2.0 style)
    - Duplicate ids surface as sqlalchemy.exc.IntegrityError on create
    - update() on an unknown id is a no-op
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(self, webinar: Webinar) -> None:
        """Insert a new webinar row.

        Args:
            webinar: Webinar entity to persist.
        """
        self._session.add(self._to_model(webinar))
        await self._session.commit()

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Find webinar by ID.

        Args:
            webinar_id: Webinar's unique identifier.

        Returns:
            Webinar entity if found, None otherwise.
        """
        stmt = select(WebinarModel).where(WebinarModel.id == webinar_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def update(self, webinar: Webinar) -> None:
        """Write the webinar's current state to its row.

        Args:
            webinar: Webinar entity carrying the new state.
        """
        stmt = select(WebinarModel).where(WebinarModel.id == webinar.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return

        model.title = webinar.title
        model.start_date = webinar.start_date.astimezone(UTC)
        model.end_date = webinar.end_date.astimezone(UTC)
        model.seats = webinar.seats

        await self._session.commit()

    # =========================================================================
    # Entity ↔ Model Conversion
    # =========================================================================

    def _to_domain(self, model: WebinarModel) -> Webinar:
        """Convert database model to domain entity.

        SQLite drops timezone info, so naive values are read back as UTC.

        Args:
            model: SQLAlchemy Webinar model.

        Returns:
            Webinar domain entity.
        """
        return Webinar(
            id=model.id,
            organizer_id=model.organizer_id,
            title=model.title,
            start_date=assume_utc(model.start_date),
            end_date=assume_utc(model.end_date),
            seats=model.seats,
        )

    def _to_model(self, entity: Webinar) -> WebinarModel:
        """Convert domain entity to database model (dates stored as UTC).

        Args:
            entity: Webinar domain entity.

        Returns:
            SQLAlchemy Webinar model.
        """
        return WebinarModel(
            id=entity.id,
            organizer_id=entity.organizer_id,
            title=entity.title,
            start_date=entity.start_date.astimezone(UTC),
            end_date=entity.end_date.astimezone(UTC),
            seats=entity.seats,
        )
