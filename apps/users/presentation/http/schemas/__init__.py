"""HTTP request/response schemas."""

from apps.users.presentation.http.schemas.common import ErrorResponse, HealthResponse
from apps.users.presentation.http.schemas.user import CreateUserRequestBody, UserResponseBody

__all__ = [
    "CreateUserRequestBody",
    "UserResponseBody",
    "HealthResponse",
    "ErrorResponse",
]
