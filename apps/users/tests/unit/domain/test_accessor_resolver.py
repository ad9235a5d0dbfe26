"""AccessorResolver 테스트."""

import functools
import operator

import pytest

from apps.users.domain.entities.user import User
from apps.users.domain.services.accessor_resolver import resolve_field_name


def getNickname(user):  # noqa: N802
    return user.nickname


def getAvatar(user):  # noqa: N802
    return user.avatar


def get_nickname(user):
    return user.nickname


def get(user):
    return user


def getnickname(user):
    return user.nickname


def getter(user):
    return user


class TestResolveFieldName:
    @pytest.mark.parametrize(
        ("accessor", "expected"),
        [
            (getNickname, "nickname"),
            (getAvatar, "avatar"),
            (get_nickname, "nickname"),
            (getnickname, "nickname"),
        ],
    )
    def test_strips_getter_prefix(self, accessor, expected: str) -> None:
        assert resolve_field_name(accessor) == expected

    def test_only_first_letter_is_lowered(self) -> None:
        def getProfileImageUrl(user):  # noqa: N802
            return None

        assert resolve_field_name(getProfileImageUrl) == "profileImageUrl"

    @pytest.mark.parametrize(
        ("accessor", "expected"),
        [
            (User.nickname, "nickname"),
            (User.avatar, "avatar"),
            (User.id, "id"),
        ],
    )
    def test_property_uses_getter_function_name(self, accessor, expected: str) -> None:
        assert resolve_field_name(accessor) == expected

    def test_get_prefix_is_stripped_regardless_of_case(self) -> None:
        assert resolve_field_name(getter) == "ter"

    def test_non_getter_names_are_returned_unchanged(self) -> None:
        assert resolve_field_name(get) == "get"
        assert resolve_field_name(lambda u: u) == "<lambda>"

    def test_bound_method_name(self) -> None:
        class Profile:
            def get_avatar(self):
                return None

        assert resolve_field_name(Profile().get_avatar) == "avatar"

    def test_callable_without_name_never_fails(self) -> None:
        assert resolve_field_name(operator.attrgetter("nickname")) == "attrgetter"
        assert resolve_field_name(functools.partial(get_nickname)) == "partial"
