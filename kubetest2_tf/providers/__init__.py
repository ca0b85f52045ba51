"""
providers
---------

이름 -> provider 팩토리 레지스트리.
deployer 하네스는 여기서 provider 를 찾아 플래그 등록/덤프를 호출한다.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from ..errors import UnknownProviderError
from .base import FlagSpec, Provider
from . import vpc


_REGISTRY: Dict[str, Callable[[], Provider]] = {}


def register(name: str, factory: Callable[[], Provider]) -> None:
    _REGISTRY[name] = factory


def available_providers() -> List[str]:
    return sorted(_REGISTRY)


def get_provider(name: str) -> Provider:
    try:
        factory = _REGISTRY[name]
    except KeyError:
        raise UnknownProviderError(name, available_providers()) from None
    return factory()


register(vpc.NAME, vpc.VPCProvider)


__all__ = [
    "FlagSpec",
    "Provider",
    "available_providers",
    "get_provider",
    "register",
]
