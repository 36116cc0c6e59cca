"""Command definitions (CQRS write operations).

Usage:
    from src.application.commands import OrganizeWebinar, ChangeSeats
"""

from src.application.commands.webinar_commands import ChangeSeats, OrganizeWebinar

__all__ = [
    "ChangeSeats",
    "OrganizeWebinar",
]
