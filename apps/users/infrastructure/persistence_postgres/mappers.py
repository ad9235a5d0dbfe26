"""ORM Model <-> Domain Entity 매퍼."""

from __future__ import annotations

from apps.users.domain.entities.user import User
from apps.users.domain.value_objects.user_id import UserId
from apps.users.infrastructure.persistence_postgres.models import UserModel


def user_model_to_entity(model: UserModel) -> User:
    return User(
        id_=UserId(model.user_id),
        nickname=model.nickname,
        avatar=model.avatar,
    )


def user_entity_to_model(user: User) -> UserModel:
    return UserModel(
        user_id=user.id.value,
        nickname=user.nickname,
        avatar=user.avatar,
    )


def apply_entity_to_model(user: User, model: UserModel) -> None:
    """기존 모델에 엔티티의 변경 가능 필드를 반영 (user_id는 건드리지 않음)."""
    model.nickname = user.nickname
    model.avatar = user.avatar
