"""Field Mutator.

대상 객체의 필드를 이름으로 찾아 검증 후 제자리(in-place)에서 갱신합니다.

검증 순서:
    1. 선언된 필드인지 -> 아니면 FieldNotFoundError
    2. 변경 가능 필드 목록(enum)에 속하는지 -> 아니면 ImmutableFieldError
    3. 값 타입이 필드 타입과 일치하는지 (None은 "미설정"으로 허용) -> 아니면 FieldTypeMismatchError

모든 검증은 쓰기 전에 끝나므로, 실패 시 대상은 변경되지 않습니다.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Protocol

from apps.users.domain.exceptions.field import (
    FieldNotFoundError,
    FieldTypeMismatchError,
    ImmutableFieldError,
)


class GuardedFields(Protocol):
    """검증된 필드 갱신을 지원하는 대상.

    mutable_fields 의 각 멤버는 필드 이름을 값으로 갖고 value_type 을 제공해야 합니다.
    """

    mutable_fields: ClassVar[type[Enum]]

    def declared_fields(self) -> frozenset[str]:
        """읽기 가능한 모든 필드 이름 (불변 필드 포함)."""
        ...

    def _write_field(self, field: Any, value: Any) -> None:
        """검증이 끝난 필드에 값을 씁니다."""
        ...


def _mutable_field(target: GuardedFields, field_name: str) -> Any:
    try:
        return type(target).mutable_fields(field_name)
    except ValueError:
        raise ImmutableFieldError(type(target).__name__, field_name) from None


def mutate_field(target: GuardedFields, field_name: str, value: Any) -> None:
    """필드를 검증 후 갱신합니다.

    Args:
        target: 갱신 대상 객체
        field_name: 필드 이름
        value: 새 값

    Raises:
        FieldNotFoundError: 필드가 존재하지 않음
        ImmutableFieldError: 불변 필드
        FieldTypeMismatchError: 값 타입 불일치
    """
    target_name = type(target).__name__

    if field_name not in target.declared_fields():
        raise FieldNotFoundError(target_name, field_name)

    field = _mutable_field(target, field_name)

    expected = field.value_type
    if value is not None and not isinstance(value, expected):
        raise FieldTypeMismatchError(target_name, field_name, expected, type(value))

    target._write_field(field, value)
