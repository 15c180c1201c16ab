"""
Application configuration settings
"""
import os
from typing import Tuple


class Settings:
    """Application settings"""

    # App
    APP_TITLE: str = "Workload Guard API"
    APP_VERSION: str = "1.0.0"

    # Runtime (환경변수 또는 CLI 플래그로 덮어쓰기)
    KUBECONFIG: str = os.environ.get("KUBECONFIG", "")  # 비어 있으면 in-cluster
    LISTEN_ADDRESS: str = os.environ.get("LISTEN_ADDRESS", ":8080")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "info")

    # Calico API server
    CALICO_GROUP: str = "projectcalico.org"
    CALICO_VERSION: str = "v3"
    CALICO_NETWORK_POLICY_PLURAL: str = "networkpolicies"

    DENY_POLICY_PREFIX: str = "deny-network-policy-"


def parse_listen_address(address: str) -> Tuple[str, int]:
    """"host:port" 형식의 리슨 주소를 (host, port)로 변환

    host가 비어 있으면 모든 인터페이스(0.0.0.0)에 바인딩한다.
    """
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address: {address!r}")
    return host or "0.0.0.0", int(port)


settings = Settings()
