"""
kubetest2_tf
------------

Terraform 기반 kubetest2 deployer 플러그인 패키지.
커맨드라인 플래그로 받은 클러스터 설정을 provider 별 tfvars(JSON) 파일로 내려주고,
실제 프로비저닝은 해당 파일을 읽는 외부 Terraform 실행에 맡긴다.
"""

__all__ = [
    "providers",
    "tfvars",
]
