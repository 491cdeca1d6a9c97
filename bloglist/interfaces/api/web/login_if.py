"""Login endpoint: exchange username/password for a bearer token."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException

from bloglist.helpers.exceptions import AuthenticationError
from bloglist.interfaces.api.types.auth_types import LoginRequest, LoginResponse
from bloglist.interfaces.api.web.dependencies import get_auth_service

if TYPE_CHECKING:
    from bloglist.services.infrastructure.auth_svc import AuthService

router = APIRouter(prefix="/login", tags=["Auth"])


@router.post("")
async def login(
    request: LoginRequest,
    auth_service: "AuthService" = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate and receive a token.
    Send it as ``Authorization: Bearer <token>`` on blog write requests.
    """
    try:
        result = auth_service.login(request.username, request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e)) from None
    return LoginResponse.from_dto(result)
