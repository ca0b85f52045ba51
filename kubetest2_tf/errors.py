"""
errors
------

tfvars 덤프 과정에서 발생하는 예외 정의.
"""

from __future__ import annotations


class TFVarsError(RuntimeError):
    """tfvars 생성/기록 실패의 공통 베이스."""


class SerializationError(TFVarsError):
    """설정 레코드를 JSON 으로 변환하지 못한 경우."""


class ConfigWriteError(TFVarsError):
    """tfvars 파일을 디스크에 쓰지 못한 경우."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class UnknownProviderError(KeyError):
    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.available = available

    def __str__(self) -> str:
        return (
            f"알 수 없는 provider 입니다: {self.name!r} "
            f"(사용 가능: {', '.join(self.available) or '(none)'})"
        )
