"""Application DTOs."""

from apps.users.application.common.dto.user import (
    CreateUserRequest,
    UpdateNicknameRequest,
    UserResponse,
)

__all__ = ["CreateUserRequest", "UpdateNicknameRequest", "UserResponse"]
