"""Accessor Resolver.

접근자(getter) 참조를 그 접근자가 읽는 것으로 간주되는 필드 이름으로 변환합니다.

구조 분석이 아닌 이름 규칙 기반 추론입니다.
접근자가 실제로 해당 필드를 읽는지는 검증하지 않으며, 결과 이름의 유효성은
FieldMutator가 판단합니다.

규칙:
    - property 객체는 fget 함수 이름을 사용
    - ``get_nickname`` -> ``nickname``
    - ``getNickname``, ``getnickname`` -> ``nickname`` (``get`` 제거 후 첫 글자 소문자화)
    - ``get`` 단독은 그대로, ``getter`` -> ``ter``
    - 그 외 이름은 그대로 반환 (``nickname`` -> ``nickname``, ``<lambda>`` -> ``<lambda>``)
"""

from __future__ import annotations

from typing import Any, Callable, Union

GETTER_PREFIX = "get"
SNAKE_GETTER_PREFIX = "get_"

Accessor = Union[property, Callable[[Any], Any]]


def _accessor_name(accessor: Accessor) -> str:
    """접근자의 식별자 추출."""
    if isinstance(accessor, property):
        accessor = accessor.fget
    return getattr(accessor, "__name__", type(accessor).__name__)


def resolve_field_name(accessor: Accessor) -> str:
    """접근자 참조를 필드 이름으로 해석합니다.

    실패하지 않습니다. 항상 어떤 이름이든 반환합니다.

    Args:
        accessor: 인자 없는 접근자 (property, 함수, 메서드, 임의의 callable)

    Returns:
        필드 이름
    """
    name = _accessor_name(accessor)

    if name.startswith(SNAKE_GETTER_PREFIX) and len(name) > len(SNAKE_GETTER_PREFIX):
        return name[len(SNAKE_GETTER_PREFIX) :]

    # "get" 뒤의 첫 글자는 대소문자와 무관하게 소문자화 (getnickname -> nickname)
    prefix_len = len(GETTER_PREFIX)
    if name.startswith(GETTER_PREFIX) and len(name) > prefix_len:
        return name[prefix_len].lower() + name[prefix_len + 1 :]

    return name
