"""Command handlers (use-cases)."""

from src.application.commands.handlers.change_seats_handler import ChangeSeatsHandler
from src.application.commands.handlers.organize_webinar_handler import (
    OrganizeWebinarHandler,
)

__all__ = [
    "ChangeSeatsHandler",
    "OrganizeWebinarHandler",
]
