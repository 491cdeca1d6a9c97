"""
Authentication dependencies for the FastAPI application.
Thin wrapper around AuthService for FastAPI dependency injection.
"""

from typing import TYPE_CHECKING

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bloglist.helpers.exceptions import AuthenticationError
from bloglist.interfaces.api.web.dependencies import get_auth_service

if TYPE_CHECKING:
    from bloglist.helpers.dto.user_dto import UserRecord
    from bloglist.services.infrastructure.auth_svc import AuthService

# Scheme keyword is compared case-insensitively ("bearer" and "Bearer" both work)
auth_scheme = HTTPBearer(auto_error=False)

TOKEN_ERROR = "token missing or invalid"


async def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(auth_scheme),
    auth_service: "AuthService" = Depends(get_auth_service),
) -> "UserRecord":
    """Resolve the bearer token to the calling user, or fail with 401."""
    if creds is None:
        raise HTTPException(status_code=401, detail=TOKEN_ERROR)
    token = creds.credentials.strip()
    if not token:
        raise HTTPException(status_code=401, detail=TOKEN_ERROR)

    try:
        return auth_service.authenticate(token)
    except AuthenticationError:
        raise HTTPException(status_code=401, detail=TOKEN_ERROR) from None
