"""Integration tests for the SQLAlchemy WebinarRepository.

Tests cover:
- Create and retrieve
- Update persistence across sessions
- Unknown ids (find returns None, update is a no-op)
- Duplicate ids surface as IntegrityError
- Timezone round-trip
- Unbounded titles

Architecture:
- Real SQLAlchemy engine on in-memory SQLite (aiosqlite)
- Fresh database per test
"""

from datetime import UTC, datetime

import pytest
import pytest_asyncio
from sqlalchemy import Text, text
from sqlalchemy.exc import IntegrityError

from src.domain.entities.webinar import Webinar
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models import WebinarModel
from src.infrastructure.persistence.repositories.webinar_repository import (
    WebinarRepository,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# Test Helpers
# =============================================================================


def create_test_webinar(webinar_id: str = "webinar-id", seats: int = 100) -> Webinar:
    return Webinar(
        id=webinar_id,
        organizer_id="alice",
        title="My first webinar",
        start_date=datetime(2024, 1, 10, 10, 0, tzinfo=UTC),
        end_date=datetime(2024, 1, 10, 11, 0, tzinfo=UTC),
        seats=seats,
    )


@pytest_asyncio.fixture
async def test_database():
    """Fresh in-memory database with the webinars table."""
    db = Database(database_url=TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


# =============================================================================
# Tests
# =============================================================================


@pytest.mark.integration
class TestWebinarRepository:
    """SQLAlchemy adapter against a real database."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_id(self, test_database):
        async with test_database.get_session() as session:
            await WebinarRepository(session).create(create_test_webinar())

        async with test_database.get_session() as session:
            found = await WebinarRepository(session).find_by_id("webinar-id")

        assert found == create_test_webinar()

    @pytest.mark.asyncio
    async def test_find_unknown_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await WebinarRepository(session).find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_update_persists_seats(self, test_database):
        async with test_database.get_session() as session:
            await WebinarRepository(session).create(create_test_webinar())

        async with test_database.get_session() as session:
            repo = WebinarRepository(session)
            webinar = await repo.find_by_id("webinar-id")
            webinar.update(seats=250)
            await repo.update(webinar)

        async with test_database.get_session() as session:
            found = await WebinarRepository(session).find_by_id("webinar-id")

        assert found.seats == 250
        assert found.organizer_id == "alice"

    @pytest.mark.asyncio
    async def test_long_title_round_trips_unchanged(self, test_database):
        webinar = create_test_webinar()
        webinar.title = "Clean architecture " * 400

        async with test_database.get_session() as session:
            await WebinarRepository(session).create(webinar)

        async with test_database.get_session() as session:
            found = await WebinarRepository(session).find_by_id("webinar-id")

        assert found.title == webinar.title
        assert len(found.title) == 7600

    def test_title_column_has_no_length_limit(self):
        title_type = WebinarModel.__table__.c.title.type

        assert isinstance(title_type, Text)
        assert title_type.length is None

    def test_model_repr_shows_id(self):
        model = WebinarModel(id="webinar-id", organizer_id="alice", title="t", seats=1)

        assert repr(model) == "<WebinarModel(id='webinar-id')>"

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_noop(self, test_database):
        async with test_database.get_session() as session:
            await WebinarRepository(session).update(create_test_webinar("ghost"))

        async with test_database.get_session() as session:
            result = await session.execute(text("SELECT COUNT(*) FROM webinars"))
            assert result.scalar() == 0

    @pytest.mark.asyncio
    async def test_duplicate_id_raises_integrity_error(self, test_database):
        async with test_database.get_session() as session:
            await WebinarRepository(session).create(create_test_webinar())

        with pytest.raises(IntegrityError):
            async with test_database.get_session() as session:
                await WebinarRepository(session).create(create_test_webinar(seats=5))

        async with test_database.get_session() as session:
            found = await WebinarRepository(session).find_by_id("webinar-id")
        assert found.seats == 100

    @pytest.mark.asyncio
    async def test_loaded_dates_are_timezone_aware_utc(self, test_database):
        async with test_database.get_session() as session:
            await WebinarRepository(session).create(create_test_webinar())

        async with test_database.get_session() as session:
            found = await WebinarRepository(session).find_by_id("webinar-id")

        assert found.start_date.tzinfo is not None
        assert found.start_date == datetime(2024, 1, 10, 10, 0, tzinfo=UTC)
        assert found.end_date == datetime(2024, 1, 10, 11, 0, tzinfo=UTC)

    @pytest.mark.asyncio
    async def test_loaded_entity_has_fresh_initial_state(self, test_database):
        async with test_database.get_session() as session:
            await WebinarRepository(session).create(create_test_webinar(seats=120))

        async with test_database.get_session() as session:
            found = await WebinarRepository(session).find_by_id("webinar-id")

        assert found.initial_state.seats == 120


@pytest.mark.integration
class TestDatabase:
    """Database wrapper on SQLite."""

    @pytest.mark.asyncio
    async def test_check_connection(self, test_database):
        assert await test_database.check_connection() is True

    @pytest.mark.asyncio
    async def test_session_rolls_back_on_error(self, test_database):
        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                await session.execute(
                    text(
                        "INSERT INTO webinars (id, organizer_id, title, start_date, "
                        "end_date, seats) VALUES ('x', 'alice', 't', "
                        "'2024-01-10 10:00:00', '2024-01-10 11:00:00', 10)"
                    )
                )
                raise RuntimeError("abort")

        async with test_database.get_session() as session:
            result = await session.execute(text("SELECT COUNT(*) FROM webinars"))
            assert result.scalar() == 0
