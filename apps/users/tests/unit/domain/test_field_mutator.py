"""FieldMutator 테스트.

User 외의 대상에도 동작하는지 확인하기 위해 테스트 전용 대상 클래스를 사용합니다.
"""

from enum import Enum

import pytest

from apps.users.domain.exceptions import (
    FieldNotFoundError,
    FieldTypeMismatchError,
    ImmutableFieldError,
)
from apps.users.domain.services.field_mutator import mutate_field


class BadgeField(str, Enum):
    LABEL = "label"
    LEVEL = "level"

    @property
    def value_type(self) -> type:
        return int if self is BadgeField.LEVEL else str


class Badge:
    mutable_fields = BadgeField

    def __init__(self, code: str, label: str, level: int) -> None:
        self.code = code
        self.label = label
        self.level = level
        self.writes: list[BadgeField] = []

    def declared_fields(self) -> frozenset[str]:
        return frozenset({"code", "label", "level"})

    def _write_field(self, field: BadgeField, value) -> None:
        self.writes.append(field)
        setattr(self, field.value, value)


@pytest.fixture
def badge() -> Badge:
    return Badge(code="eco-1", label="씨앗", level=1)


class TestMutateField:
    def test_writes_mutable_field_in_place(self, badge: Badge) -> None:
        mutate_field(badge, "label", "숲지기")

        assert badge.label == "숲지기"
        assert badge.writes == [BadgeField.LABEL]

    def test_checks_declared_type_per_field(self, badge: Badge) -> None:
        mutate_field(badge, "level", 3)

        assert badge.level == 3

        with pytest.raises(FieldTypeMismatchError) as exc_info:
            mutate_field(badge, "level", "3")

        assert exc_info.value.expected is int
        assert exc_info.value.actual is str
        assert badge.level == 3

    def test_missing_field(self, badge: Badge) -> None:
        with pytest.raises(FieldNotFoundError) as exc_info:
            mutate_field(badge, "color", "green")

        assert exc_info.value.target == "Badge"
        assert exc_info.value.field_name == "color"
        assert badge.writes == []

    def test_declared_but_not_mutable(self, badge: Badge) -> None:
        with pytest.raises(ImmutableFieldError) as exc_info:
            mutate_field(badge, "code", "eco-2")

        assert "Badge.code is immutable" in str(exc_info.value)
        assert badge.code == "eco-1"
        assert badge.writes == []

    def test_existence_is_checked_before_mutability(self, badge: Badge) -> None:
        # "nickname" 은 어떤 enum 에도 없지만 선언되지 않았으므로 NotFound
        with pytest.raises(FieldNotFoundError):
            mutate_field(badge, "nickname", "x")
