"""Domain -> DTO converters."""

from __future__ import annotations

from apps.users.application.common.dto.user import UserResponse
from apps.users.domain.entities.user import User


def user_to_response(user: User) -> UserResponse:
    """User 애그리거트를 응답 DTO로 변환."""
    return UserResponse(
        user_id=user.id.value,
        nickname=user.nickname,
        avatar=user.avatar,
    )
