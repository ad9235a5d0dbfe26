"""Health/Readiness probe endpoints."""

from fastapi import APIRouter

from apps.users.presentation.http.schemas.common import HealthResponse
from apps.users.setup.constants import SERVICE_NAME

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe - 서비스 생존 확인"""
    return HealthResponse(status="healthy", service=SERVICE_NAME)


@router.get("/ready", response_model=HealthResponse)
async def readiness() -> HealthResponse:
    """Readiness probe - 트래픽 수신 준비 확인"""
    return HealthResponse(status="ready", service=SERVICE_NAME)
