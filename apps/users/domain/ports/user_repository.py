"""UserRepository Port.

User 애그리거트 영속화를 위한 인터페이스입니다.
"""

from typing import Protocol

from apps.users.domain.entities.user import User
from apps.users.domain.value_objects.user_id import UserId


class UserRepository(Protocol):
    """사용자 저장소 인터페이스.

    구현체:
        - SqlaUserRepository (infrastructure/persistence_postgres/adapters/)

    커밋은 TransactionManager에서 처리합니다.
    """

    async def find_by_id(self, user_id: UserId) -> User:
        """ID로 사용자 조회.

        Raises:
            UserNotFoundError: 해당 ID의 사용자가 없는 경우
        """
        ...

    async def save(self, user: User) -> User:
        """사용자 저장 (신규 추가 또는 갱신).

        같은 ID와 같은 내용으로 반복 저장해도 결과 상태는 동일합니다.

        Returns:
            저장 후 다시 복원한 User
        """
        ...
