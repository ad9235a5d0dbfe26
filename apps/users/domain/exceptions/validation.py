"""Validation Domain Exceptions."""

from apps.users.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """값 검증 실패."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Validation error for '{field}': {reason}")


class InvalidUserIdError(ValidationError):
    """유효하지 않은 사용자 ID."""

    def __init__(self, value: object) -> None:
        super().__init__("user_id", f"must be a non-empty string, got {value!r}")
