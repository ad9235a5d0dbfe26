"""UserId Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.users.domain.exceptions.validation import InvalidUserIdError
from apps.users.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class UserId(ValueObject):
    """사용자 식별자 Value Object.

    문자열을 래핑하여 타입 안전성을 보장합니다.
    생성 규칙은 UserIdGenerator 포트가 담당하며, 여기서는 형식을 강제하지 않습니다
    (외부에서 전달된 기존 ID도 그대로 수용).
    """

    value: str

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidUserIdError(self.value)

    def __str__(self) -> str:
        return self.value
