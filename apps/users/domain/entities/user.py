"""User Entity."""

from __future__ import annotations

from typing import Any, ClassVar

from apps.users.domain.entities.base import Entity
from apps.users.domain.enums.user_field import UserField
from apps.users.domain.services.accessor_resolver import Accessor, resolve_field_name
from apps.users.domain.services.field_mutator import mutate_field
from apps.users.domain.value_objects.user_id import UserId


class User(Entity[UserId]):
    """사용자 애그리거트 루트.

    Attributes:
        id: 사용자 ID (불변, 생성 시에만 설정)
        nickname: 닉네임
        avatar: 프로필 이미지

    nickname/avatar 는 ``update`` 로만 변경할 수 있습니다. 개별 setter는 없습니다.

    Example:
        >>> user = User.create(UserId("ab12cd3407"))
        >>> user.update(User.nickname, "초록이코")
        >>> user.update(UserField.AVATAR, "https://cdn.example.com/a.png")
    """

    __slots__ = ("_nickname", "_avatar")

    mutable_fields: ClassVar[type[UserField]] = UserField
    immutable_fields: ClassVar[frozenset[str]] = frozenset({"id"})

    def __init__(
        self,
        *,
        id_: UserId,
        nickname: str | None = None,
        avatar: str | None = None,
    ) -> None:
        super().__init__(id_=id_)
        self._nickname = nickname
        self._avatar = avatar

    @classmethod
    def create(cls, user_id: UserId) -> "User":
        """닉네임/아바타가 비어 있는 새 사용자 생성."""
        return cls(id_=user_id)

    @property
    def nickname(self) -> str | None:
        return self._nickname

    @property
    def avatar(self) -> str | None:
        return self._avatar

    def declared_fields(self) -> frozenset[str]:
        return self.immutable_fields | {field.value for field in self.mutable_fields}

    def update(self, field: UserField | Accessor, value: Any) -> None:
        """필드 갱신 (유일한 변경 진입점).

        Args:
            field: 변경할 필드 태그 또는 접근자 (``User.nickname`` 등)
            value: 새 값

        Raises:
            FieldNotFoundError: 접근자가 존재하지 않는 필드로 해석됨
            ImmutableFieldError: 식별자 등 불변 필드 지정
            FieldTypeMismatchError: 값 타입 불일치
        """
        field_name = field.value if isinstance(field, UserField) else resolve_field_name(field)
        mutate_field(self, field_name, value)

    def _write_field(self, field: UserField, value: str | None) -> None:
        if field is UserField.NICKNAME:
            self._nickname = value
        elif field is UserField.AVATAR:
            self._avatar = value
