"""Domain Entities."""

from apps.users.domain.entities.base import Entity
from apps.users.domain.entities.user import User

__all__ = ["Entity", "User"]
