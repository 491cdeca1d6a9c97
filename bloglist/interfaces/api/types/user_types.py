"""
User API request and response types.
"""

from __future__ import annotations

from pydantic import BaseModel
from typing_extensions import Self

from bloglist.helpers.dto.user_dto import RegisterUserParams, UserBlogSummary, UserView
from bloglist.interfaces.api.id_codec import encode_id


class RegisterUserRequest(BaseModel):
    """Body of POST /api/users. Lengths are checked by the service."""

    username: str | None = None
    name: str | None = None
    password: str | None = None

    def to_params(self) -> RegisterUserParams:
        return RegisterUserParams(username=self.username, password=self.password, name=self.name)


class UserBlogResponse(BaseModel):
    id: str
    title: str
    author: str
    url: str
    likes: int

    @classmethod
    def from_dto(cls, blog: UserBlogSummary) -> Self:
        return cls(id=encode_id(blog.id), title=blog.title, author=blog.author, url=blog.url, likes=blog.likes)


class UserResponse(BaseModel):
    """User as exposed over HTTP (no password hash)."""

    id: str
    username: str
    name: str | None = None
    blogs: list[UserBlogResponse]

    @classmethod
    def from_dto(cls, user: UserView) -> Self:
        return cls(
            id=encode_id(user.id),
            username=user.username,
            name=user.name,
            blogs=[UserBlogResponse.from_dto(b) for b in user.blogs],
        )
