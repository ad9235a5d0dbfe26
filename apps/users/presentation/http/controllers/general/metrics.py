"""Metrics Controller."""

from fastapi import APIRouter

from apps.users.setup.constants import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def get_metrics() -> dict:
    """서비스 정보 조회."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "architecture": "clean-architecture",
    }
