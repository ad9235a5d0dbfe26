"""FastAPI dependency providers.

요청마다 세션 하나를 열고, 같은 세션을 Repository와 TransactionManager에 주입합니다.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.users.application.commands.create_user import CreateUserInteractor
from apps.users.application.commands.rename_user import RenameUserInteractor
from apps.users.application.queries.get_user import GetUserInteractor
from apps.users.infrastructure.adapters.user_id_generator_short_uuid import (
    ShortUuidUserIdGenerator,
)
from apps.users.infrastructure.persistence_postgres.adapters import (
    SqlaTransactionManager,
    SqlaUserRepository,
)
from apps.users.infrastructure.persistence_postgres.session import get_db_session


def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SqlaUserRepository:
    return SqlaUserRepository(session)


def get_transaction_manager(
    session: AsyncSession = Depends(get_db_session),
) -> SqlaTransactionManager:
    return SqlaTransactionManager(session)


def get_user_id_generator() -> ShortUuidUserIdGenerator:
    return ShortUuidUserIdGenerator()


def get_create_user_interactor(
    repository: SqlaUserRepository = Depends(get_user_repository),
    id_generator: ShortUuidUserIdGenerator = Depends(get_user_id_generator),
    transaction_manager: SqlaTransactionManager = Depends(get_transaction_manager),
) -> CreateUserInteractor:
    return CreateUserInteractor(
        user_repository=repository,
        id_generator=id_generator,
        transaction_manager=transaction_manager,
    )


def get_get_user_interactor(
    repository: SqlaUserRepository = Depends(get_user_repository),
) -> GetUserInteractor:
    return GetUserInteractor(user_repository=repository)


def get_rename_user_interactor(
    repository: SqlaUserRepository = Depends(get_user_repository),
    transaction_manager: SqlaTransactionManager = Depends(get_transaction_manager),
) -> RenameUserInteractor:
    return RenameUserInteractor(
        user_repository=repository,
        transaction_manager=transaction_manager,
    )
