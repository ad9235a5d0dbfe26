"""User DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserRequest:
    """사용자 생성 요청 DTO."""

    nickname: str | None
    avatar: str | None


@dataclass(frozen=True)
class UpdateNicknameRequest:
    """닉네임 변경 요청 DTO."""

    user_id: str
    nickname: str


@dataclass(frozen=True)
class UserResponse:
    """사용자 응답 DTO."""

    user_id: str
    nickname: str | None
    avatar: str | None
