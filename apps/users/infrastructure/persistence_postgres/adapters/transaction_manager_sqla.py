"""SQLAlchemy Transaction Manager.

SqlaUserRepository.save 는 flush 까지만 수행하므로,
요청 세션의 변경사항은 여기서 commit 될 때 확정됩니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlaTransactionManager:
    """요청 단위 AsyncSession 의 커밋/롤백.

    Repository 와 같은 세션을 주입받아야 합니다 (presentation/http/dependencies.py).
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def commit(self) -> None:
        """flush 된 사용자 변경사항 확정."""
        await self._session.commit()

    async def rollback(self) -> None:
        """커밋 전 변경사항 폐기."""
        await self._session.rollback()
