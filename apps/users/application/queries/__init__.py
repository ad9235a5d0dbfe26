"""User queries."""

from apps.users.application.queries.get_user import GetUserInteractor

__all__ = ["GetUserInteractor"]
