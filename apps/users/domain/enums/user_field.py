"""UserField enum."""

from __future__ import annotations

from enum import Enum


class UserField(str, Enum):
    """User 애그리거트에서 변경 가능한 필드 목록.

    식별자(id)는 의도적으로 포함하지 않습니다.
    목록에 없는 필드는 갱신 대상으로 지정할 수 없습니다.
    """

    NICKNAME = "nickname"
    AVATAR = "avatar"

    @property
    def value_type(self) -> type:
        """필드에 저장되는 값의 타입."""
        return str
