"""Users ORM Models.

도메인 엔티티(User)와 분리된 영속화 모델입니다.
변환은 mappers 모듈에서 처리합니다.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from apps.users.infrastructure.persistence_postgres.base import Base
from apps.users.setup.constants import (
    AVATAR_COLUMN_LENGTH,
    NICKNAME_COLUMN_LENGTH,
    USER_ID_COLUMN_LENGTH,
)


class UserModel(Base):
    __tablename__ = "users"

    # SQLite(테스트)는 INTEGER PRIMARY KEY만 autoincrement 지원
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(USER_ID_COLUMN_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    nickname: Mapped[str | None] = mapped_column(String(NICKNAME_COLUMN_LENGTH), nullable=True)
    avatar: Mapped[str | None] = mapped_column(String(AVATAR_COLUMN_LENGTH), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
