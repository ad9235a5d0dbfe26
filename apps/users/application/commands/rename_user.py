"""RenameUser Command.

닉네임 변경 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.users.domain.entities.user import User
from apps.users.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from apps.users.application.common.dto.user import UpdateNicknameRequest
    from apps.users.application.common.ports.transaction_manager import TransactionManager
    from apps.users.domain.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RenameUserInteractor:
    """닉네임 변경 Interactor.

    사용자를 찾지 못하면 UserNotFoundError가 그대로 전파되고 저장은 일어나지 않습니다.
    """

    def __init__(
        self,
        user_repository: "UserRepository",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_repository = user_repository
        self._transaction_manager = transaction_manager

    async def execute(self, request: "UpdateNicknameRequest") -> None:
        user_id = UserId(request.user_id)
        user = await self._user_repository.find_by_id(user_id)

        previous = user.nickname
        user.update(User.nickname, request.nickname)

        await self._user_repository.save(user)
        await self._transaction_manager.commit()

        logger.info(
            "User renamed",
            extra={"user_id": user_id.value, "previous_nickname": previous},
        )
