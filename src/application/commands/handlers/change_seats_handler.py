"""ChangeSeats command handler.

Applies a seat-count change to an existing webinar after checking existence,
ownership, and the seat rules.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, errors, protocols)
- Uses Result types for error handling

Concurrency:
    Load-then-update with no compare-and-swap. Two concurrent changes to the
    same webinar may race; the last write wins unless the repository adapter
    isolates them.
"""

from src.application.commands.webinar_commands import ChangeSeats
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.webinar import MAX_SEATS, Webinar
from src.domain.errors import webinar_error
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.webinar_repository import WebinarRepository


class ChangeSeatsHandler:
    """Handler for ChangeSeats command.

    Dependencies (injected via constructor):
        - WebinarRepository: For loading and persisting the webinar
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        webinar_repo: WebinarRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            webinar_repo: Webinar repository.
            logger: Structured logger.
        """
        self._webinar_repo = webinar_repo
        self._logger = logger

    async def handle(self, cmd: ChangeSeats) -> Result[None, DomainError]:
        """Handle ChangeSeats command.

        Args:
            cmd: ChangeSeats command with acting user, webinar id and target seats.

        Returns:
            Success(None): Seats updated (also when the target equals the
                current count).
            Failure(NotFoundError): WEBINAR_NOT_FOUND.
            Failure(AuthorizationError): WEBINAR_NOT_ORGANIZER.
            Failure(ValidationError): WEBINAR_REDUCE_SEATS or WEBINAR_TOO_MANY_SEATS.

        Side Effects:
            - Updates the webinar in the repository (on success only)
        """
        # Step 1: Verify webinar exists
        webinar = await self._webinar_repo.find_by_id(cmd.webinar_id)
        if webinar is None:
            return self._reject(cmd, webinar_error.not_found(cmd.webinar_id))

        # Step 2: Verify ownership
        if cmd.user.id != webinar.organizer_id:
            return self._reject(cmd, webinar_error.not_organizer())

        # Step 3: Seat rules
        error = self._validate_seats(webinar, cmd.seats)
        if error is not None:
            return self._reject(cmd, error)

        # Step 4: Apply and persist
        previous_seats = webinar.seats
        webinar.update(seats=cmd.seats)
        await self._webinar_repo.update(webinar)

        self._logger.info(
            "webinar_seats_changed",
            webinar_id=webinar.id,
            previous_seats=previous_seats,
            seats=webinar.seats,
        )
        return Success(value=None)

    def _validate_seats(self, webinar: Webinar, seats: int) -> DomainError | None:
        if seats < webinar.seats:
            return webinar_error.reduce_seats()
        if seats > MAX_SEATS:
            return webinar_error.too_many_seats()
        return None

    def _reject(self, cmd: ChangeSeats, error: DomainError) -> Failure[DomainError]:
        self._logger.warning(
            "webinar_seats_change_rejected",
            webinar_id=cmd.webinar_id,
            user_id=cmd.user.id,
            reason=error.code.value,
        )
        return Failure(error=error)
