"""FastAPI exception handlers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from apps.users.application.common.exceptions.base import ApplicationError
from apps.users.domain.exceptions.base import DomainError
from apps.users.presentation.http.errors.translators import translate_domain_error
from apps.users.presentation.http.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


async def _handle_error(request: Request, exc: Exception) -> JSONResponse:
    error = translate_domain_error(exc)

    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Request failed",
            exc_info=exc,
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": error.status_code,
                "error_type": type(exc).__name__,
            },
        )
    else:
        logger.info(
            "Request rejected",
            extra={
                "path": request.url.path,
                "status_code": error.status_code,
                "error_type": type(exc).__name__,
            },
        )

    body = ErrorResponse(detail=error.detail, code=error.code)
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """도메인/애플리케이션 예외를 HTTP 응답으로 변환하는 핸들러 등록."""
    app.add_exception_handler(DomainError, _handle_error)
    app.add_exception_handler(ApplicationError, _handle_error)
