"""Domain port adapters."""

from apps.users.infrastructure.adapters.user_id_generator_short_uuid import (
    ShortUuidUserIdGenerator,
)

__all__ = ["ShortUuidUserIdGenerator"]
