"""Domain Services.

엔티티 단독으로 처리하기 어려운 로직을 서비스로 분리합니다.
둘 다 상태가 없으며, 대상 객체는 호출 동안에만 참조합니다.
"""

from apps.users.domain.services.accessor_resolver import resolve_field_name
from apps.users.domain.services.field_mutator import GuardedFields, mutate_field

__all__ = ["resolve_field_name", "mutate_field", "GuardedFields"]
