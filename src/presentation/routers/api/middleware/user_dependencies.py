"""Caller identification dependency.

The acting user is identified by the X-User-Id request header. There is no
credential check: an upstream gateway is expected to authenticate the caller
and forward its id.

Usage:
    @router.post("/webinars")
    async def organize_webinar(current_user: AuthenticatedUser) -> ...:
        ...
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.domain.entities.user import User

USER_ID_HEADER = "X-User-Id"


async def get_current_user(
    x_user_id: Annotated[str | None, Header(alias=USER_ID_HEADER)] = None,
) -> User:
    """Resolve the acting user from the X-User-Id header.

    Returns:
        User with the header value as id.

    Raises:
        HTTPException 401: If the header is missing or blank.
    """
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {USER_ID_HEADER} header",
        )
    return User(id=x_user_id.strip())


# Type alias for route signatures
AuthenticatedUser = Annotated[User, Depends(get_current_user)]
