"""User endpoints: registration and listing."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException

from bloglist.helpers.exceptions import DuplicateUsernameError, InvalidUserDataError, UserNotFoundError
from bloglist.interfaces.api.id_codec import decode_path_id
from bloglist.interfaces.api.types.user_types import RegisterUserRequest, UserResponse
from bloglist.interfaces.api.web.dependencies import get_user_service

if TYPE_CHECKING:
    from bloglist.services.domain.user_svc import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("")
async def list_users(
    user_service: "UserService" = Depends(get_user_service),
) -> list[UserResponse]:
    """List all users with the blogs they created."""
    return [UserResponse.from_dto(user) for user in user_service.list_users()]


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    user_service: "UserService" = Depends(get_user_service),
) -> UserResponse:
    user_id = decode_path_id(user_id, "users")
    try:
        return UserResponse.from_dto(user_service.get_user(user_id))
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None


@router.post("", status_code=201)
async def register_user(
    request: RegisterUserRequest,
    user_service: "UserService" = Depends(get_user_service),
) -> UserResponse:
    """Register a new user."""
    try:
        user = user_service.register_user(request.to_params())
    except (DuplicateUsernameError, InvalidUserDataError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return UserResponse.from_dto(user)
