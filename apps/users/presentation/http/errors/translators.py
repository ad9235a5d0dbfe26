"""Domain/Application error → HTTP status 변환.

매핑 규칙:
    - UserNotFoundError → 404 USER_NOT_FOUND
    - ValidationError → 400 VALIDATION_ERROR
    - UserServiceUnavailableError → 503 USER_SERVICE_UNAVAILABLE
    - 그 외 (FieldAccessError 등 프로그래밍 오류) → 500 INTERNAL_ERROR
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import status

from apps.users.application.common.exceptions.gateway import UserServiceUnavailableError
from apps.users.domain.exceptions.user import UserNotFoundError
from apps.users.domain.exceptions.validation import ValidationError


@dataclass(frozen=True)
class HttpError:
    status_code: int
    code: str
    detail: str


def translate_domain_error(exc: Exception) -> HttpError:
    if isinstance(exc, UserNotFoundError):
        return HttpError(status.HTTP_404_NOT_FOUND, "USER_NOT_FOUND", str(exc))
    if isinstance(exc, ValidationError):
        return HttpError(status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", str(exc))
    if isinstance(exc, UserServiceUnavailableError):
        return HttpError(
            status.HTTP_503_SERVICE_UNAVAILABLE, "USER_SERVICE_UNAVAILABLE", str(exc)
        )
    return HttpError(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "Internal server error"
    )
