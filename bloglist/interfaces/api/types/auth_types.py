"""
Login API request and response types.
"""

from __future__ import annotations

from pydantic import BaseModel
from typing_extensions import Self

from bloglist.helpers.dto.user_dto import LoginResult


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str
    name: str | None = None

    @classmethod
    def from_dto(cls, result: LoginResult) -> Self:
        return cls(token=result.token, username=result.username, name=result.name)
