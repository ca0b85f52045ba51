"""
tfvars
------

Terraform 변수 파일(<provider>.auto.tfvars.json) 직렬화/기록을 담당하는 모듈.

레코드는 dataclass 로 표현하고, 각 필드의 metadata["json"] 에
Terraform 쪽에서 기대하는 키 이름을 적어둔다. 키 이름/대소문자/순서는
외부 Terraform 모듈과의 호환 계약이므로 바꾸면 안 된다.
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import Field, fields
from typing import Any, Dict

from .errors import ConfigWriteError, SerializationError
from .logging_utils import get_logger


logger = get_logger(__name__)


TFVARS_SUFFIX = ".auto.tfvars.json"
FILE_MODE = 0o644


def tfvars_filename(provider_name: str) -> str:
    return provider_name + TFVARS_SUFFIX


def json_key(f: Field) -> str:
    return f.metadata.get("json", f.name)


def to_mapping(record: Any) -> Dict[str, Any]:
    """
    dataclass 레코드를 JSON 키 -> 값 dict 로 변환한다. (필드 선언 순서 유지)
    """
    return {json_key(f): getattr(record, f.name) for f in fields(record)}


def to_json(record: Any) -> str:
    """
    레코드를 들여쓰기 2칸 JSON 문자열로 변환한다.
    비 ASCII 문자는 이스케이프하지 않고 그대로 둔다.

    파일에는 UTF-8 로 쓰므로, 인코딩할 수 없는 값(argv 의 lone surrogate 등)도
    여기서 SerializationError 로 걸러낸다.
    """
    try:
        text = json.dumps(to_mapping(record), indent=2, ensure_ascii=False)
        text.encode("utf-8")
        return text
    except (TypeError, ValueError) as e:
        raise SerializationError(f"설정을 JSON 으로 변환하지 못했습니다: {e}") from e


def write_tfvars(directory: str, provider_name: str, record: Any) -> str:
    """
    directory/<provider_name>.auto.tfvars.json 에 레코드를 기록하고 경로를 반환한다.

    같은 디렉토리의 임시 파일에 먼저 쓴 뒤 rename 하므로,
    실패하더라도 대상 파일은 '없음' 또는 '완전히 기록됨' 상태만 보인다.
    """
    filename = os.path.join(directory, tfvars_filename(provider_name))
    content = to_json(record)

    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=directory,
            prefix=f".{tfvars_filename(provider_name)}.",
            suffix=".tmp",
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_path, FILE_MODE)
        os.replace(tmp_path, filename)
        tmp_path = None
    except OSError as e:
        raise ConfigWriteError(
            f"JSON 설정을 기록하지 못했습니다: {filename}, err: {e}",
            path=filename,
        ) from e
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)

    logger.info("tfvars 파일을 기록했습니다: %s", filename)
    return filename
