"""Entity Base Class.

Clean Architecture에서 Entity는:
- 고유한 식별자(ID)를 가짐
- 비즈니스 규칙과 상태를 캡슐화
- ORM과 분리된 순수 Python 객체
"""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class Entity(Generic[T]):
    """모든 Entity의 베이스 클래스.

    식별자는 생성 시에만 설정되며 읽기 전용 ``id`` 로 노출됩니다.

    Example:
        >>> class User(Entity[UserId]):
        ...     def __init__(self, *, id_: UserId, nickname: str | None = None):
        ...         super().__init__(id_=id_)
        ...         self._nickname = nickname
    """

    __slots__ = ("_id",)

    def __init__(self, *, id_: T) -> None:
        self._id: T = id_

    @property
    def id(self) -> T:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r})"
