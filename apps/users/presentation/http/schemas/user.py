"""User HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from apps.users.application.common.dto.user import UserResponse
from apps.users.setup.constants import AVATAR_COLUMN_LENGTH, NICKNAME_COLUMN_LENGTH


class CreateUserRequestBody(BaseModel):
    """사용자 생성 요청."""

    nickname: str | None = Field(None, max_length=NICKNAME_COLUMN_LENGTH, description="닉네임")
    avatar: str | None = Field(None, max_length=AVATAR_COLUMN_LENGTH, description="프로필 이미지 URL")


class UserResponseBody(BaseModel):
    """사용자 응답."""

    user_id: str = Field(..., description="사용자 ID")
    nickname: str | None = Field(None, description="닉네임")
    avatar: str | None = Field(None, description="프로필 이미지 URL")

    @classmethod
    def from_dto(cls, dto: UserResponse) -> "UserResponseBody":
        return cls(user_id=dto.user_id, nickname=dto.nickname, avatar=dto.avatar)
