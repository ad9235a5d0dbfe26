"""Application Exceptions."""

from apps.users.application.common.exceptions.base import ApplicationError
from apps.users.application.common.exceptions.gateway import UserServiceUnavailableError

__all__ = ["ApplicationError", "UserServiceUnavailableError"]
