"""TransactionManager Port.

Command Interactor(CreateUser, RenameUser)는 저장 후 정확히 한 번 commit 합니다.
실패한 명령은 commit 되지 않습니다.
"""

from typing import Protocol


class TransactionManager(Protocol):
    """명령 단위 트랜잭션 경계.

    구현체:
        - SqlaTransactionManager (infrastructure/persistence_postgres/adapters/)
    """

    async def commit(self) -> None:
        """UserRepository.save 로 반영된 변경사항 확정."""
        ...

    async def rollback(self) -> None:
        """확정되지 않은 변경사항 폐기."""
        ...
