"""Webinar resource endpoints.

    POST /api/v1/webinars                      - Organize a webinar
    POST /api/v1/webinars/{webinar_id}/seats   - Change a webinar's seat count

The caller is identified by the X-User-Id header. Handlers return Result
types; failures are mapped to ApplicationError and rendered as RFC 7807.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import ChangeSeats, OrganizeWebinar
from src.application.commands.handlers import ChangeSeatsHandler, OrganizeWebinarHandler
from src.application.errors import ApplicationError
from src.core.container import get_change_seats_handler, get_organize_webinar_handler
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.middleware.user_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.schemas.webinar_schemas import (
    WebinarCreateRequest,
    WebinarCreateResponse,
    WebinarSeatsUpdateRequest,
    WebinarSeatsUpdateResponse,
)

router = APIRouter(prefix="/webinars", tags=["Webinars"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ProblemDetails},
    status.HTTP_401_UNAUTHORIZED: {"model": ProblemDetails},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=WebinarCreateResponse,
    responses=_ERROR_RESPONSES,
)
async def organize_webinar(
    request: Request,
    data: WebinarCreateRequest,
    current_user: AuthenticatedUser,
    handler: OrganizeWebinarHandler = Depends(get_organize_webinar_handler),
) -> WebinarCreateResponse | JSONResponse:
    """Organize a new webinar owned by the caller.

    POST /api/v1/webinars → 201 Created

    Returns:
        WebinarCreateResponse with the new id.
        JSONResponse with RFC 7807 error on failure.
    """
    result = await handler.handle(
        OrganizeWebinar(
            user_id=current_user.id,
            title=data.title,
            seats=data.seats,
            start_date=data.start_date,
            end_date=data.end_date,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError.from_domain_error(result.error),
            request=request,
            trace_id=get_trace_id(),
        )

    return WebinarCreateResponse.from_dto(result.value)


@router.post(
    "/{webinar_id}/seats",
    status_code=status.HTTP_200_OK,
    response_model=WebinarSeatsUpdateResponse,
    responses={
        **_ERROR_RESPONSES,
        status.HTTP_403_FORBIDDEN: {"model": ProblemDetails},
        status.HTTP_404_NOT_FOUND: {"model": ProblemDetails},
    },
)
async def change_seats(
    request: Request,
    webinar_id: str,
    data: WebinarSeatsUpdateRequest,
    current_user: AuthenticatedUser,
    handler: ChangeSeatsHandler = Depends(get_change_seats_handler),
) -> WebinarSeatsUpdateResponse | JSONResponse:
    """Change a webinar's seat count (organizer only, never downwards).

    POST /api/v1/webinars/{webinar_id}/seats → 200 OK
    """
    result = await handler.handle(
        ChangeSeats(user=current_user, webinar_id=webinar_id, seats=data.seats)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError.from_domain_error(result.error),
            request=request,
            trace_id=get_trace_id(),
        )

    return WebinarSeatsUpdateResponse()
