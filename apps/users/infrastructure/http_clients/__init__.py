"""Remote API clients."""

from apps.users.infrastructure.http_clients.users_api_client import UsersApiClient

__all__ = ["UsersApiClient"]
