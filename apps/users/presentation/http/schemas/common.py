"""Common HTTP Schemas."""

from pydantic import BaseModel, Field

from apps.users.setup.constants import SERVICE_NAME


class HealthResponse(BaseModel):
    """Health Check 응답."""

    status: str = Field(default="healthy", description="서비스 상태")
    service: str = Field(default=SERVICE_NAME, description="서비스 이름")


class ErrorResponse(BaseModel):
    """에러 응답."""

    detail: str = Field(..., description="에러 메시지")
    code: str | None = Field(None, description="에러 코드")
