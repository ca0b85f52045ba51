"""
pytest 설정:

로컬 작업 환경에 설치된 다른 버전의 kubetest2_tf 패키지가 존재할 때,
`pytest` 실행 시 site-packages 쪽이 먼저 import 되어 테스트가 깨질 수 있다.

테스트는 항상 현재 레포의 소스를 대상으로 해야 하므로, repo root 를 sys.path 최상단에 고정한다.
"""

from __future__ import annotations

import os
import sys

import pytest


def pytest_configure() -> None:
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)


@pytest.fixture(autouse=True)
def clean_flag_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    플래그 envvar(VPC_* 등)가 로컬 환경이나 .env 로드로 남아 있으면
    '미지정 플래그 = 기본값' 검증이 깨지므로 테스트마다 비워둔다.
    """
    from kubetest2_tf.providers import vpc

    for spec in vpc.FLAGS:
        # setenv 로 원래 상태를 기록해두어야 테스트 중 추가된 값도 teardown 에서 지워진다.
        monkeypatch.setenv(spec.envvar, "")
        monkeypatch.delenv(spec.envvar)
