"""Domain Enums."""

from apps.users.domain.enums.user_field import UserField

__all__ = ["UserField"]
