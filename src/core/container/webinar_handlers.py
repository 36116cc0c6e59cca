"""Webinar handler dependency factories.

Request-scoped handler instances for webinar operations:
- OrganizeWebinar
- ChangeSeats
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_date_generator,
    get_db_session,
    get_id_generator,
    get_logger,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.change_seats_handler import (
        ChangeSeatsHandler,
    )
    from src.application.commands.handlers.organize_webinar_handler import (
        OrganizeWebinarHandler,
    )


# ============================================================================
# Webinar Handler Factories
# ============================================================================


async def get_organize_webinar_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "OrganizeWebinarHandler":
    """Get OrganizeWebinar command handler (request-scoped).

    Creates handler with:
    - WebinarRepository (request-scoped)
    - UuidIdGenerator and SystemDateGenerator
    - Logger (app-scoped singleton)

    Returns:
        OrganizeWebinarHandler instance.
    """
    from src.application.commands.handlers.organize_webinar_handler import (
        OrganizeWebinarHandler,
    )
    from src.infrastructure.persistence.repositories import WebinarRepository

    return OrganizeWebinarHandler(
        webinar_repo=WebinarRepository(session=session),
        id_generator=get_id_generator(),
        date_generator=get_date_generator(),
        logger=get_logger().bind(handler="OrganizeWebinarHandler"),
    )


async def get_change_seats_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ChangeSeatsHandler":
    """Get ChangeSeats command handler (request-scoped).

    Returns:
        ChangeSeatsHandler instance.
    """
    from src.application.commands.handlers.change_seats_handler import (
        ChangeSeatsHandler,
    )
    from src.infrastructure.persistence.repositories import WebinarRepository

    return ChangeSeatsHandler(
        webinar_repo=WebinarRepository(session=session),
        logger=get_logger().bind(handler="ChangeSeatsHandler"),
    )
