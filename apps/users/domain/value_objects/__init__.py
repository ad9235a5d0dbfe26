"""Domain Value Objects."""

from apps.users.domain.value_objects.user_id import UserId

__all__ = ["UserId"]
