"""User Domain Exceptions."""

from apps.users.domain.exceptions.base import DomainError


class UserNotFoundError(DomainError):
    """사용자를 찾을 수 없음."""

    def __init__(self, user_id: str | None = None) -> None:
        self.user_id = user_id
        message = f"User not found: {user_id}" if user_id else "User not found"
        super().__init__(message)
