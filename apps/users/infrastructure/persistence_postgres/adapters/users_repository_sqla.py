"""SQLAlchemy User Repository.

UserRepository 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from apps.users.domain.entities.user import User
from apps.users.domain.exceptions.user import UserNotFoundError
from apps.users.domain.value_objects.user_id import UserId
from apps.users.infrastructure.persistence_postgres.mappers import (
    apply_entity_to_model,
    user_entity_to_model,
    user_model_to_entity,
)
from apps.users.infrastructure.persistence_postgres.models import UserModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaUserRepository:
    """SQLAlchemy 기반 User Repository.

    변경사항은 flush까지만 반영하고, 커밋은 TransactionManager에서 처리합니다.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def _get_model(self, user_id: UserId) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.user_id == user_id.value)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: UserId) -> User:
        """ID로 사용자 조회."""
        model = await self._get_model(user_id)
        if model is None:
            logger.debug("User lookup missed", extra={"user_id": user_id.value})
            raise UserNotFoundError(user_id.value)
        return user_model_to_entity(model)

    async def save(self, user: User) -> User:
        """user_id 기준 upsert."""
        model = await self._get_model(user.id)
        if model is None:
            model = user_entity_to_model(user)
            self._session.add(model)
        else:
            apply_entity_to_model(user, model)

        await self._session.flush()
        return user_model_to_entity(model)
