"""Gateway Exceptions."""

from apps.users.application.common.exceptions.base import ApplicationError


class UserServiceUnavailableError(ApplicationError):
    """Users API 통신 실패.

    네트워크 오류, 타임아웃, 5xx 응답 등으로 원격 users 서비스와
    통신할 수 없는 경우 발생합니다.
    """

    def __init__(self, reason: str = "Users service unavailable") -> None:
        super().__init__(reason)
