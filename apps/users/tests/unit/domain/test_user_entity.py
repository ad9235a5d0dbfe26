"""User 애그리거트 테스트.

update 는 성공하면 필드 하나만 바뀌고, 실패하면 애그리거트가 그대로 남아야 합니다.
"""

import pytest

from apps.users.domain.entities.user import User
from apps.users.domain.enums.user_field import UserField
from apps.users.domain.exceptions import (
    FieldNotFoundError,
    FieldTypeMismatchError,
    ImmutableFieldError,
)
from apps.users.domain.value_objects.user_id import UserId


def _snapshot(user: User) -> tuple:
    return (user.id, user.nickname, user.avatar)


class TestUserCreation:
    def test_create_leaves_profile_unset(self) -> None:
        user_id = UserId("1")

        user = User.create(user_id)

        assert user.id == user_id
        assert user.nickname is None
        assert user.avatar is None

    def test_constructor_populates_all_fields(self) -> None:
        user_id = UserId("2")

        user = User(id_=user_id, nickname="testNickname", avatar="testAvatarUrl")

        assert user.id == user_id
        assert user.nickname == "testNickname"
        assert user.avatar == "testAvatarUrl"

    def test_equality_by_identity(self) -> None:
        a = User(id_=UserId("3"), nickname="a", avatar=None)
        b = User(id_=UserId("3"), nickname="b", avatar="x")

        assert a == b
        assert hash(a) == hash(b)
        assert a != User.create(UserId("4"))

    def test_has_no_attribute_setters(self) -> None:
        user = User.create(UserId("5"))

        with pytest.raises(AttributeError):
            user.nickname = "direct"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            user.id = UserId("6")  # type: ignore[misc]


class TestUserUpdate:
    def test_update_nickname_with_property_accessor(self, make_user) -> None:
        user = make_user(nickname="old", avatar="avatar.png")

        user.update(User.nickname, "new")

        assert user.nickname == "new"
        assert user.avatar == "avatar.png"
        assert user.id == UserId("ab12cd3407")

    def test_update_avatar_with_field_tag(self, make_user) -> None:
        user = make_user(nickname="old", avatar="avatar.png")

        user.update(UserField.AVATAR, "https://cdn.example.com/new.png")

        assert user.avatar == "https://cdn.example.com/new.png"
        assert user.nickname == "old"

    def test_update_both_fields_on_fresh_user(self) -> None:
        user = User.create(UserId("3"))

        user.update(User.nickname, "updatedNickname")
        user.update(User.avatar, "updatedAvatarUrl")

        assert user.nickname == "updatedNickname"
        assert user.avatar == "updatedAvatarUrl"

    def test_update_with_getter_function(self, make_user) -> None:
        def get_nickname(u: User) -> str | None:
            return u.nickname

        user = make_user()

        user.update(get_nickname, "초록이코")

        assert user.nickname == "초록이코"

    def test_update_with_lowercase_getter_name(self, make_user) -> None:
        def getnickname(u: User) -> str | None:
            return u.nickname

        user = make_user(nickname="old", avatar="avatar.png")

        user.update(getnickname, "new")

        assert user.nickname == "new"
        assert user.avatar == "avatar.png"

    def test_update_accepts_none_as_unset(self, make_user) -> None:
        user = make_user(avatar="avatar.png")

        user.update(UserField.AVATAR, None)

        assert user.avatar is None

    def test_update_identity_is_rejected(self) -> None:
        original_id = UserId("5")
        user = User.create(original_id)

        with pytest.raises(ImmutableFieldError) as exc_info:
            user.update(User.id, UserId("6"))

        assert exc_info.value.field_name == "id"
        assert user.id == original_id

    def test_update_unknown_field_is_rejected(self, make_user) -> None:
        user = make_user()
        before = _snapshot(user)

        with pytest.raises(FieldNotFoundError) as exc_info:
            user.update(lambda u: "dummy", "value")

        assert exc_info.value.field_name == "<lambda>"
        assert _snapshot(user) == before

    def test_update_with_wrong_value_type_is_rejected(self, make_user) -> None:
        user = make_user()
        before = _snapshot(user)

        with pytest.raises(FieldTypeMismatchError):
            user.update(UserField.NICKNAME, 42)

        assert _snapshot(user) == before

    def test_field_errors_are_not_silently_ignored(self, make_user) -> None:
        user = make_user()

        with pytest.raises(FieldNotFoundError):
            user.update(lambda u: u.nickname, "value")
        assert user.nickname == "old"
