"""SQLAlchemy Declarative Base.

Users 서비스 전용.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for Users service models."""

    pass
