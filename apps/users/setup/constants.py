"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# =============================================================================
# Service Identity
# =============================================================================

SERVICE_NAME = "users-api"
SERVICE_VERSION = "1.0.0"

API_PREFIX = "/api/v1"

# =============================================================================
# Logging Constants (12-Factor App Compliance)
# =============================================================================

ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

# 로그 레코드에서 제외할 기본 속성
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

NOISY_LOGGERS = (
    "uvicorn.access",
    "httpx",
    "httpcore",
    "sqlalchemy.engine",
    "aiosqlite",
)

# =============================================================================
# PII Masking
# =============================================================================

SENSITIVE_FIELD_PATTERNS = frozenset({"password", "secret", "token", "authorization"})
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# =============================================================================
# User ID 형식 (UUID hex 8자리 + 2자리 난수)
# =============================================================================

USER_ID_HEX_LENGTH = 8
USER_ID_SUFFIX_DIGITS = 2
USER_ID_SUFFIX_UPPER = 10**USER_ID_SUFFIX_DIGITS
USER_ID_LENGTH = USER_ID_HEX_LENGTH + USER_ID_SUFFIX_DIGITS
USER_ID_PATTERN = r"^[0-9a-f]{8}[0-9]{2}$"

# =============================================================================
# Persistence
# =============================================================================

USER_ID_COLUMN_LENGTH = 64
NICKNAME_COLUMN_LENGTH = 120
AVATAR_COLUMN_LENGTH = 512
