"""Webinar DTOs (Data Transfer Objects).

Result dataclasses returned by webinar command handlers.

DTOs:
    - OrganizeWebinarResult: Result from OrganizeWebinar command
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class OrganizeWebinarResult:
    """Result of organizing a webinar.

    Attributes:
        id: Identifier of the created webinar.
    """

    id: str
