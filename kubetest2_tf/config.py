from __future__ import annotations

import os
from typing import Optional, List

from dotenv import load_dotenv

from .logging_utils import get_logger


logger = get_logger(__name__)


ENV_FILES_DEFAULT_ORDER = [".env", ".env.infra", ".env.secrets"]


def load_env_files(base_dir: str = ".",
                   files: Optional[List[str]] = None) -> List[str]:
    """
    주어진 디렉토리에서 .env 계열 파일을 순서대로 로드하고, 실제로 읽은 파일 경로를 반환한다.
    후순위 파일이 같은 키를 덮어쓴다.

    secret 플래그(VPC_API_KEY 등)는 플래그 이름에서 만든 환경변수도 읽으므로,
    API Key 같은 값은 .env.secrets 에 두고 커맨드라인에서 빼둘 수 있다.
    """
    order = files or ENV_FILES_DEFAULT_ORDER
    loaded: List[str] = []
    for name in order:
        path = os.path.join(base_dir, name)
        if os.path.exists(path):
            load_dotenv(path, override=True)
            loaded.append(path)
    if loaded:
        logger.debug("env 파일 로드: %s", loaded)
    return loaded
