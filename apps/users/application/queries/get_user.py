"""GetUser Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.users.application.common.converters import user_to_response
from apps.users.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from apps.users.application.common.dto.user import UserResponse
    from apps.users.domain.ports.user_repository import UserRepository


class GetUserInteractor:
    """ID로 사용자 조회."""

    def __init__(self, user_repository: "UserRepository") -> None:
        self._user_repository = user_repository

    async def execute(self, user_id: str) -> "UserResponse":
        user = await self._user_repository.find_by_id(UserId(user_id))
        return user_to_response(user)
