"""Domain Exceptions."""

from apps.users.domain.exceptions.base import DomainError
from apps.users.domain.exceptions.field import (
    FieldAccessError,
    FieldNotFoundError,
    FieldTypeMismatchError,
    ImmutableFieldError,
)
from apps.users.domain.exceptions.user import UserNotFoundError
from apps.users.domain.exceptions.validation import InvalidUserIdError, ValidationError

__all__ = [
    "DomainError",
    "FieldAccessError",
    "FieldNotFoundError",
    "FieldTypeMismatchError",
    "ImmutableFieldError",
    "UserNotFoundError",
    "InvalidUserIdError",
    "ValidationError",
]
