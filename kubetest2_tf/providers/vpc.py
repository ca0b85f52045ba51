"""
providers.vpc
-------------

IBM Cloud VPC 위에 테스트용 Kubernetes 클러스터를 띄우는 Terraform 모듈용 provider.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .base import FlagSpec, Provider


NAME = "vpc"


def _var(key: str, default: str = "") -> Any:
    return field(default=default, metadata={"json": key})


@dataclass(frozen=True)
class TFVars:
    # JSON 키는 Terraform 모듈의 변수명과 일치해야 한다.
    vpc_name: str = _var("VPCName")
    subnet_name: str = _var("SubnetName")
    api_key: str = _var("Apikey")
    ssh_key: str = _var("SSHKey")
    dns_name: str = _var("DNSName")
    dns_zone: str = _var("DNSZone")
    region: str = _var("Region")
    zone: str = _var("Zone")
    resource_group: str = _var("ResourceGroup", "Default")
    node_image_name: str = _var("NodeImageName")
    node_profile: str = _var("NodeProfile")
    kube_version: str = _var("KubeVersion")
    container_version: str = _var("ContVersion")


FLAGS = [
    FlagSpec("vpc-name", "vpc_name", help="IBM Cloud VPC 이름"),
    FlagSpec("vpc-subnet", "subnet_name", help="IBM Cloud VPC 서브넷"),
    FlagSpec("vpc-api-key", "api_key", help="API 호출에 사용할 IBM Cloud API Key", secret=True),
    FlagSpec("vpc-ssh-key", "ssh_key", help="VSI 접속에 사용할 VPC SSH Key"),
    FlagSpec("vpc-dns", "dns_name", help="IBM Cloud DNS 이름"),
    FlagSpec("vpc-dns-zone", "dns_zone", help="IBM Cloud DNS Zone 이름"),
    FlagSpec("vpc-region", "region", help="IBM Cloud VPC 리전 이름"),
    FlagSpec("vpc-zone", "zone", help="IBM Cloud VPC 존 이름"),
    FlagSpec(
        "vpc-resource-group",
        "resource_group",
        default="Default",
        help="IBM Cloud 리소스 그룹 이름 (조회: ibmcloud resource groups)",
    ),
    FlagSpec("vpc-node-image-name", "node_image_name", help="노드 이미지 이름 (조회: ibmcloud is images)"),
    FlagSpec("vpc-node-profile", "node_profile", help="노드 인스턴스 프로파일 (조회: ibmcloud is instance-profiles)"),
    FlagSpec("vpc-kube-version", "kube_version", help="Kubernetes 버전"),
    FlagSpec("vpc-cont-version", "container_version", help="containerd 버전"),
]


class VPCProvider(Provider):
    name = NAME
    record_type = TFVars
    flags = FLAGS
