"""Users API Client.

다른 서비스에서 Users API로 사용자를 조회할 때 사용하는 HTTP 클라이언트 라이브러리입니다.
이 서비스 자체는 사용하지 않으며, 호출 측 서비스가 import 해서 사용합니다.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, Field, ValidationError

from apps.users.application.common.dto.user import UserResponse
from apps.users.application.common.exceptions.gateway import UserServiceUnavailableError
from apps.users.domain.exceptions.user import UserNotFoundError
from apps.users.setup.config import Settings
from apps.users.setup.constants import API_PREFIX

logger = logging.getLogger(__name__)

USER_PATH = f"{API_PREFIX}/users/{{user_id}}"


class _UserPayload(BaseModel):
    """GET /users/{user_id} 응답 본문."""

    user_id: str = Field(..., min_length=1)
    nickname: str | None = None
    avatar: str | None = None


class UsersApiClient:
    """Users API 조회 클라이언트.

    httpx.AsyncClient 수명은 호출 측에서 관리합니다 (base_url 포함).

    매핑 규칙:
        - 404 → UserNotFoundError
        - 네트워크 오류 / 5xx / 형식이 잘못된 응답 본문 → UserServiceUnavailableError
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def build_http_client(cls, settings: Settings) -> httpx.AsyncClient:
        """설정 기반 httpx 클라이언트 생성."""
        return httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.api_timeout_seconds,
        )

    async def get_user_by_id(self, user_id: str) -> UserResponse:
        try:
            response = await self._client.get(USER_PATH.format(user_id=user_id))
        except httpx.HTTPError as e:
            logger.warning(
                "Users API request failed",
                extra={"user_id": user_id, "error_type": type(e).__name__},
            )
            raise UserServiceUnavailableError(str(e) or type(e).__name__) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise UserNotFoundError(user_id)
        if response.is_server_error:
            logger.warning(
                "Users API returned server error",
                extra={"user_id": user_id, "status_code": response.status_code},
            )
            raise UserServiceUnavailableError(f"Users API responded {response.status_code}")
        response.raise_for_status()

        try:
            payload = _UserPayload.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                "Users API returned malformed body",
                extra={"user_id": user_id, "error_count": e.error_count()},
            )
            raise UserServiceUnavailableError("Users API returned malformed body") from e

        return UserResponse(
            user_id=payload.user_id,
            nickname=payload.nickname,
            avatar=payload.avatar,
        )
