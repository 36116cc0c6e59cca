"""Infrastructure dependency factories.

Application-scoped singletons and request-scoped resources:
- Logging (structlog console adapter)
- Database (owned by the FastAPI lifespan, read from app.state)
- Id and date generators
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.date_generator_protocol import DateGeneratorProtocol
    from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = not settings.is_development
    return ConsoleAdapter(
        use_json=use_json,
        log_level=settings.log_level,
        service=settings.app_name,
    )


def create_database() -> Database:
    """Build a Database from settings.

    Called once by the application lifespan. Use get_db_session() for
    per-request sessions.

    Returns:
        New Database manager.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


def get_id_generator() -> "IdGeneratorProtocol":
    """Identifier source for new webinars (UUIDv7)."""
    from src.infrastructure.generators.uuid_id_generator import UuidIdGenerator

    return UuidIdGenerator()


def get_date_generator() -> "DateGeneratorProtocol":
    """Clock used by the lead-time rule (system UTC time)."""
    from src.infrastructure.generators.system_date_generator import (
        SystemDateGenerator,
    )

    return SystemDateGenerator()


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


def get_database(request: Request) -> Database:
    """Return the Database owned by the running application.

    Raises:
        RuntimeError: If the lifespan has not created the database.
    """
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized; application lifespan not run")
    return database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    async with database.get_session() as session:
        yield session
