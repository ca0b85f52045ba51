"""
providers.base
--------------

모든 provider 가 만족해야 하는 공통 계약(initialize / bind_flags / load_flags / dump_config).

플래그 파싱 결과는 provider 레코드에 직접 쓰지 않는다.
click 이 파싱한 이름 -> 문자열 dict 를 load_flags 로 넘기면
그 시점에 불변 레코드를 한 번에 만든다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, ClassVar, List, Mapping, Optional

import click

from ..logging_utils import get_logger
from ..tfvars import tfvars_filename, write_tfvars


logger = get_logger(__name__)


@dataclass(frozen=True)
class FlagSpec:
    flag: str
    field: str
    default: str = ""
    help: str = ""
    secret: bool = False

    @property
    def envvar(self) -> str:
        # --vpc-api-key -> VPC_API_KEY
        return self.flag.replace("-", "_").upper()

    def to_option(self) -> click.Option:
        return click.Option(
            [f"--{self.flag}", self.field],
            type=str,
            default=self.default,
            # 환경변수는 secret 플래그만 읽는다. 나머지는 지정하지 않으면 기본값 그대로다.
            envvar=self.envvar if self.secret else None,
            show_default=bool(self.default),
            show_envvar=self.secret,
            help=self.help,
        )


class Provider:
    """
    tfvars 레코드를 소유하는 provider 베이스 클래스.

    서브클래스는 name, record_type, flags 만 정의하면 된다.
    """

    name: ClassVar[str] = ""
    record_type: ClassVar[type]
    flags: ClassVar[List[FlagSpec]] = []

    def __init__(self) -> None:
        self.tfvars = self.record_type()

    def initialize(self) -> None:
        logger.debug("provider 초기화: %s (수행할 작업 없음)", self.name)

    def bind_flags(self, command: click.Command) -> click.Command:
        """
        provider 의 플래그를 click 명령에 옵션으로 등록한다.
        """
        for spec in self.flags:
            command.params.append(spec.to_option())
        return command

    def load_flags(self, values: Mapping[str, Optional[Any]]) -> Any:
        """
        파싱된 플래그 값(필드명 -> 문자열)으로 레코드를 새로 만든다.

        레코드에 없는 키는 무시하고, None 은 지정되지 않은 것으로 보고 기본값을 쓴다.
        """
        known = {f.name for f in fields(self.record_type)}
        kwargs = {
            k: str(v)
            for k, v in values.items()
            if k in known and v is not None
        }
        self.tfvars = self.record_type(**kwargs)
        logger.debug("설정 로드됨: %s", self.masked())
        return self.tfvars

    def masked(self) -> dict[str, str]:
        secrets = {spec.field for spec in self.flags if spec.secret}
        masked: dict[str, str] = {}
        for f in fields(self.tfvars):
            value = getattr(self.tfvars, f.name)
            masked[f.name] = "****" if f.name in secrets and value else value
        return masked

    def output_path(self, directory: str) -> str:
        return os.path.join(directory, tfvars_filename(self.name))

    def dump_config(self, directory: str) -> str:
        """
        현재 레코드를 directory/<name>.auto.tfvars.json 으로 기록하고 경로를 반환한다.
        """
        return write_tfvars(directory, self.name, self.tfvars)
