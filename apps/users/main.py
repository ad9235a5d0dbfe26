"""Users API Application

FastAPI 애플리케이션 설정 및 미들웨어 구성
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.users.infrastructure.persistence_postgres.session import create_schema, get_engine
from apps.users.presentation.http.controllers.general.router import router as general_router
from apps.users.presentation.http.controllers.users import router as users_router
from apps.users.presentation.http.errors import register_exception_handlers
from apps.users.setup.config import get_settings
from apps.users.setup.constants import API_PREFIX, SERVICE_VERSION
from apps.users.setup.logging import configure_logging

# 구조화된 로깅 설정 (ECS JSON 포맷)
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    settings = get_settings()
    if settings.schema_auto_create:
        await create_schema(get_engine())
    yield
    # 엔진이 생성된 경우에만 정리
    if get_engine.cache_info().currsize:
        await get_engine().dispose()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성

    Returns:
        FastAPI: 구성된 애플리케이션 인스턴스
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="User profile service",
        version=SERVICE_VERSION,
        docs_url=f"{API_PREFIX}/users/docs",
        openapi_url=f"{API_PREFIX}/users/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(general_router)
    app.include_router(users_router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
