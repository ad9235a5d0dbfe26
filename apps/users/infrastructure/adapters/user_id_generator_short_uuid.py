"""Short UUID User ID Generator.

UserIdGenerator 포트의 구현체입니다.
"""

from __future__ import annotations

import secrets
import uuid
from typing import Callable

from apps.users.domain.value_objects.user_id import UserId
from apps.users.setup.constants import (
    USER_ID_HEX_LENGTH,
    USER_ID_SUFFIX_DIGITS,
    USER_ID_SUFFIX_UPPER,
)


class ShortUuidUserIdGenerator:
    """10자리 사용자 ID 생성기.

    UUID v4 hex 앞 8자리 + 00~99 균등 난수 2자리 (zero-padded).
    예: ``3f9a0c1e07``

    Note:
        충돌 확률은 생일 문제 수준으로만 제한됩니다. 예약/중복 확인을 하지 않으므로
        전역 유일성을 보장하지 않습니다.
    """

    def __init__(
        self,
        uuid_factory: Callable[[], uuid.UUID] = uuid.uuid4,
        randbelow: Callable[[int], int] = secrets.randbelow,
    ) -> None:
        self._uuid_factory = uuid_factory
        self._randbelow = randbelow

    def __call__(self) -> UserId:
        prefix = self._uuid_factory().hex[:USER_ID_HEX_LENGTH]
        suffix = self._randbelow(USER_ID_SUFFIX_UPPER)
        return UserId(f"{prefix}{suffix:0{USER_ID_SUFFIX_DIGITS}d}")
