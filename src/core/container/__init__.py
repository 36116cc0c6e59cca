"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_change_seats_handler

The container is organized into modules:
- infrastructure: Core services (logging, database, generators)
- webinar_handlers: Webinar command handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    create_database,
    get_database,
    get_date_generator,
    get_db_session,
    get_id_generator,
    get_logger,
)

# Webinar handlers
from src.core.container.webinar_handlers import (
    get_change_seats_handler,
    get_organize_webinar_handler,
)

__all__ = [
    # Infrastructure
    "create_database",
    "get_database",
    "get_date_generator",
    "get_db_session",
    "get_id_generator",
    "get_logger",
    # Webinar handlers
    "get_change_seats_handler",
    "get_organize_webinar_handler",
]
