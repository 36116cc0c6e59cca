"""OrganizeWebinar command handler.

Validates and creates a new webinar on behalf of its organizer.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, errors, protocols)
- Uses Result types for error handling
- Never touches the repository when validation fails
"""

from src.application.commands.webinar_commands import OrganizeWebinar
from src.application.dtos.webinar_dtos import OrganizeWebinarResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.webinar import (
    MAX_SEATS,
    MIN_LEAD_TIME,
    MIN_SEATS,
    Webinar,
    assume_utc,
)
from src.domain.errors import webinar_error
from src.domain.protocols.date_generator_protocol import DateGeneratorProtocol
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.webinar_repository import WebinarRepository


class OrganizeWebinarHandler:
    """Handler for OrganizeWebinar command.

    Dependencies (injected via constructor):
        - WebinarRepository: For persistence
        - IdGeneratorProtocol: For the new webinar id
        - DateGeneratorProtocol: For "now" in the lead-time rule
        - LoggerProtocol: For structured logging

    Returns:
        Result[OrganizeWebinarResult, DomainError]
    """

    def __init__(
        self,
        webinar_repo: WebinarRepository,
        id_generator: IdGeneratorProtocol,
        date_generator: DateGeneratorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            webinar_repo: Webinar repository.
            id_generator: Identifier source.
            date_generator: Clock.
            logger: Structured logger.
        """
        self._webinar_repo = webinar_repo
        self._id_generator = id_generator
        self._date_generator = date_generator
        self._logger = logger

    async def handle(
        self, cmd: OrganizeWebinar
    ) -> Result[OrganizeWebinarResult, DomainError]:
        """Handle OrganizeWebinar command.

        Checks run in a fixed order and stop at the first failure:
        not enough seats, too many seats, then dates too soon.

        Args:
            cmd: OrganizeWebinar command.

        Returns:
            Success(OrganizeWebinarResult): Webinar created.
            Failure(ValidationError): NOT_ENOUGH_SEATS, TOO_MANY_SEATS
                or DATES_TOO_SOON.

        Side Effects:
            - Creates the webinar in the repository (on success only)
        """
        # Step 1: Build entity with a fresh id (naive dates are read as UTC)
        webinar = Webinar(
            id=self._id_generator.generate(),
            organizer_id=cmd.user_id,
            title=cmd.title,
            start_date=assume_utc(cmd.start_date),
            end_date=assume_utc(cmd.end_date),
            seats=cmd.seats,
        )

        # Step 2: Validate
        error = self._validate(webinar)
        if error is not None:
            self._logger.warning(
                "webinar_organize_rejected",
                user_id=cmd.user_id,
                reason=error.code.value,
            )
            return Failure(error=error)

        # Step 3: Persist
        await self._webinar_repo.create(webinar)

        self._logger.info(
            "webinar_organized",
            webinar_id=webinar.id,
            organizer_id=webinar.organizer_id,
            seats=webinar.seats,
        )
        return Success(value=OrganizeWebinarResult(id=webinar.id))

    def _validate(self, webinar: Webinar) -> DomainError | None:
        if webinar.seats < MIN_SEATS:
            return webinar_error.not_enough_seats()
        if webinar.seats > MAX_SEATS:
            return webinar_error.too_many_seats()
        if webinar.start_date - self._date_generator.now() < MIN_LEAD_TIME:
            return webinar_error.dates_too_soon()
        return None
