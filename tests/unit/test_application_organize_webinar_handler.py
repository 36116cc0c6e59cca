"""Unit tests for OrganizeWebinarHandler.

Tests the organize webinar command handler business logic.
Uses the in-memory repository, fixed generators and a mocked logger.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.commands.handlers.organize_webinar_handler import (
    OrganizeWebinarHandler,
)
from src.application.commands.webinar_commands import OrganizeWebinar
from src.application.dtos.webinar_dtos import OrganizeWebinarResult
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.errors import WebinarError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.webinar_repository import WebinarRepository
from src.infrastructure.generators import FixedDateGenerator, FixedIdGenerator
from src.infrastructure.persistence.repositories import InMemoryWebinarRepository

NOW = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)


# =============================================================================
# Test Fixtures
# =============================================================================


def create_command(
    seats: int = 100,
    start_date: datetime = datetime(2024, 1, 10, 10, 0, tzinfo=UTC),
    end_date: datetime = datetime(2024, 1, 10, 11, 0, tzinfo=UTC),
    user_id: str = "alice",
) -> OrganizeWebinar:
    return OrganizeWebinar(
        user_id=user_id,
        title="My first webinar",
        seats=seats,
        start_date=start_date,
        end_date=end_date,
    )


def create_handler(
    repo: InMemoryWebinarRepository | None = None,
) -> tuple[OrganizeWebinarHandler, InMemoryWebinarRepository, MagicMock]:
    """Create handler with in-memory repository and fixed generators."""
    repo = repo or InMemoryWebinarRepository()
    logger = MagicMock(spec=LoggerProtocol)

    handler = OrganizeWebinarHandler(
        webinar_repo=repo,
        id_generator=FixedIdGenerator(),
        date_generator=FixedDateGenerator(NOW),
        logger=logger,
    )

    return handler, repo, logger


# =============================================================================
# Success Tests
# =============================================================================


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_returns_generated_id():
    # Arrange
    handler, _, _ = create_handler()

    # Act
    result = await handler.handle(create_command())

    # Assert
    assert isinstance(result, Success)
    assert result.value == OrganizeWebinarResult(id="id-1")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_persists_webinar():
    # Arrange
    handler, repo, _ = create_handler()

    # Act
    await handler.handle(create_command())

    # Assert
    webinar = repo.find_by_id_sync("id-1")
    assert webinar is not None
    assert webinar.organizer_id == "alice"
    assert webinar.title == "My first webinar"
    assert webinar.seats == 100
    assert webinar.start_date == datetime(2024, 1, 10, 10, 0, tzinfo=UTC)
    assert webinar.end_date == datetime(2024, 1, 10, 11, 0, tzinfo=UTC)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_logs_success():
    # Arrange
    handler, _, logger = create_handler()

    # Act
    await handler.handle(create_command())

    # Assert
    logger.info.assert_called_once_with(
        "webinar_organized",
        webinar_id="id-1",
        organizer_id="alice",
        seats=100,
    )


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("seats", [1, 1000])
async def test_organize_webinar_accepts_seat_bounds(seats):
    handler, repo, _ = create_handler()

    result = await handler.handle(create_command(seats=seats))

    assert isinstance(result, Success)
    assert repo.find_by_id_sync("id-1").seats == seats


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_exactly_three_days_ahead_succeeds():
    handler, _, _ = create_handler()
    start = NOW + timedelta(days=3)

    result = await handler.handle(
        create_command(start_date=start, end_date=start + timedelta(hours=1))
    )

    assert isinstance(result, Success)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_does_not_check_end_after_start():
    """End dates are stored as given."""
    handler, repo, _ = create_handler()

    result = await handler.handle(
        create_command(
            start_date=datetime(2024, 1, 10, 10, 0, tzinfo=UTC),
            end_date=datetime(2024, 1, 9, 10, 0, tzinfo=UTC),
        )
    )

    assert isinstance(result, Success)
    assert repo.find_by_id_sync("id-1") is not None


# =============================================================================
# Failure Tests
# =============================================================================


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_too_soon_fails():
    # Arrange
    handler, repo, _ = create_handler()

    # Act
    result = await handler.handle(
        create_command(
            start_date=datetime(2024, 1, 3, 23, 59, 59, tzinfo=UTC),
            end_date=datetime(2024, 1, 4, 0, 59, 59, tzinfo=UTC),
        )
    )

    # Assert
    assert isinstance(result, Failure)
    assert isinstance(result.error, ValidationError)
    assert result.error.code == ErrorCode.WEBINAR_DATES_TOO_SOON
    assert result.error.message == "Webinar must be scheduled at least 3 days in advance"
    assert result.error.field == "start_date"
    assert repo.database == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_one_second_short_of_three_days_fails():
    handler, _, _ = create_handler()
    start = NOW + timedelta(days=3) - timedelta(seconds=1)

    result = await handler.handle(
        create_command(start_date=start, end_date=start + timedelta(hours=1))
    )

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.WEBINAR_DATES_TOO_SOON


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_in_the_past_fails():
    handler, _, _ = create_handler()
    start = NOW - timedelta(days=1)

    result = await handler.handle(
        create_command(start_date=start, end_date=start + timedelta(hours=1))
    )

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.WEBINAR_DATES_TOO_SOON


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_naive_dates_too_soon_returns_failure():
    handler, repo, _ = create_handler()

    result = await handler.handle(
        create_command(
            start_date=datetime(2024, 1, 2, 10, 0),
            end_date=datetime(2024, 1, 2, 11, 0),
        )
    )

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.WEBINAR_DATES_TOO_SOON
    assert repo.database == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_naive_dates_are_stored_as_utc():
    handler, repo, _ = create_handler()

    result = await handler.handle(
        create_command(
            start_date=datetime(2024, 1, 10, 10, 0),
            end_date=datetime(2024, 1, 10, 11, 0),
        )
    )

    assert isinstance(result, Success)
    webinar = repo.find_by_id_sync("id-1")
    assert webinar.start_date == datetime(2024, 1, 10, 10, 0, tzinfo=UTC)
    assert webinar.end_date.tzinfo is UTC


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_too_many_seats_fails():
    # Arrange
    handler, repo, _ = create_handler()

    # Act
    result = await handler.handle(create_command(seats=1001))

    # Assert
    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.WEBINAR_TOO_MANY_SEATS
    assert result.error.message == WebinarError.TOO_MANY_SEATS
    assert repo.database == []


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("seats", [0, -5])
async def test_organize_webinar_not_enough_seats_fails(seats):
    handler, repo, _ = create_handler()

    result = await handler.handle(create_command(seats=seats))

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.WEBINAR_NOT_ENOUGH_SEATS
    assert result.error.message == "Webinar must have at least 1 seat"
    assert repo.database == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_seat_checks_run_before_date_check():
    """Seat rules win when several rules are broken at once."""
    handler, _, _ = create_handler()
    too_soon = NOW + timedelta(hours=1)

    result = await handler.handle(
        create_command(seats=0, start_date=too_soon, end_date=too_soon)
    )

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.WEBINAR_NOT_ENOUGH_SEATS


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_failure_never_calls_repository():
    # Arrange
    repo = AsyncMock(spec=WebinarRepository)
    logger = MagicMock(spec=LoggerProtocol)
    handler = OrganizeWebinarHandler(
        webinar_repo=repo,
        id_generator=FixedIdGenerator(),
        date_generator=FixedDateGenerator(NOW),
        logger=logger,
    )

    # Act
    result = await handler.handle(create_command(seats=1001))

    # Assert
    assert isinstance(result, Failure)
    repo.create.assert_not_called()
    logger.warning.assert_called_once_with(
        "webinar_organize_rejected",
        user_id="alice",
        reason="webinar_too_many_seats",
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_organize_webinar_propagates_repository_errors():
    repo = AsyncMock(spec=WebinarRepository)
    repo.create.side_effect = RuntimeError("database unavailable")
    handler = OrganizeWebinarHandler(
        webinar_repo=repo,
        id_generator=FixedIdGenerator(),
        date_generator=FixedDateGenerator(NOW),
        logger=MagicMock(spec=LoggerProtocol),
    )

    with pytest.raises(RuntimeError, match="database unavailable"):
        await handler.handle(create_command())
