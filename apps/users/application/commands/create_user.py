"""CreateUser Command.

사용자 생성 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.users.application.common.converters import user_to_response
from apps.users.domain.entities.user import User

if TYPE_CHECKING:
    from apps.users.application.common.dto.user import CreateUserRequest, UserResponse
    from apps.users.application.common.ports.transaction_manager import TransactionManager
    from apps.users.domain.ports.user_id_generator import UserIdGenerator
    from apps.users.domain.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateUserInteractor:
    """사용자 생성 Interactor.

    1. 새 UserId 생성
    2. 요청 값으로 User 애그리거트 구성
    3. 저장 후 커밋
    4. 저장된 애그리거트를 DTO로 변환
    """

    def __init__(
        self,
        user_repository: "UserRepository",
        id_generator: "UserIdGenerator",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_repository = user_repository
        self._id_generator = id_generator
        self._transaction_manager = transaction_manager

    async def execute(self, request: "CreateUserRequest") -> "UserResponse":
        user = User(
            id_=self._id_generator(),
            nickname=request.nickname,
            avatar=request.avatar,
        )

        saved = await self._user_repository.save(user)
        await self._transaction_manager.commit()

        logger.info("User created", extra={"user_id": saved.id.value})
        return user_to_response(saved)
