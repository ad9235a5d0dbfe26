"""UserIdGenerator Port.

사용자 ID 생성을 위한 도메인 포트입니다.
"""

from typing import Protocol

from apps.users.domain.value_objects.user_id import UserId


class UserIdGenerator(Protocol):
    """사용자 ID 생성기 인터페이스.

    구현체:
        - ShortUuidUserIdGenerator: UUID 앞 8자리 + 2자리 난수 (infrastructure/adapters/)

    Note:
        생성된 ID의 전역 유일성은 보장하지 않습니다.
    """

    def __call__(self) -> UserId:
        """새 UserId 생성.

        Returns:
            생성된 UserId
        """
        ...
