"""
plan
----

실제 파일을 쓰지 않고, 현재 플래그/환경변수로 만들어질 tfvars 내용을 요약한다.
"""

from __future__ import annotations

from dataclasses import fields
from typing import List

from .providers import Provider
from .tfvars import json_key


def unset_variables(provider: Provider) -> List[str]:
    return [json_key(f) for f in fields(provider.tfvars) if not getattr(provider.tfvars, f.name)]


def render_plan(provider: Provider, directory: str) -> str:
    """
    provider 레코드를 사람이 읽기 좋은 텍스트로 요약해 리턴한다.
    secret 플래그 값은 마스킹한다.
    """
    masked = provider.masked()

    lines: List[str] = []
    lines.append("# tfvars plan")
    lines.append(f"- provider: {provider.name}")
    lines.append(f"- output: {provider.output_path(directory)}")
    lines.append("")

    lines.append("## Variables")
    for f in fields(provider.tfvars):
        value = masked[f.name]
        lines.append(f"- {json_key(f)}: {value or '(not set)'}")

    # 필수값 검증은 하지 않는다. 비어 있는 값이 Terraform 에서 허용되는지는 모듈에 달려 있다.
    lines.append("")
    lines.append("## Unset variables")
    unset = unset_variables(provider)
    if unset:
        for key in unset:
            lines.append(f"- {key}")
    else:
        lines.append("- (none)")

    return "\n".join(lines)
