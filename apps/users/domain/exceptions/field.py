"""Field Mutation Exceptions.

애그리거트 필드 갱신 실패를 표현합니다.
모두 호출 측의 프로그래밍 오류 또는 불변식 위반이며, 사용자 입력 오류가 아닙니다.
"""

from apps.users.domain.exceptions.base import DomainError


class FieldAccessError(DomainError):
    """필드 갱신 오류 베이스 클래스."""

    def __init__(self, target: str, field_name: str, message: str) -> None:
        self.target = target
        self.field_name = field_name
        super().__init__(message)


class FieldNotFoundError(FieldAccessError):
    """해석된 이름에 해당하는 필드가 없음."""

    def __init__(self, target: str, field_name: str) -> None:
        super().__init__(target, field_name, f"{target} has no field '{field_name}'")


class ImmutableFieldError(FieldAccessError):
    """불변 필드(식별자 등) 갱신 시도."""

    def __init__(self, target: str, field_name: str) -> None:
        super().__init__(target, field_name, f"{target}.{field_name} is immutable")


class FieldTypeMismatchError(FieldAccessError):
    """필드 선언 타입과 값의 타입 불일치."""

    def __init__(self, target: str, field_name: str, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            target,
            field_name,
            f"{target}.{field_name} expects {expected.__name__}, got {actual.__name__}",
        )
