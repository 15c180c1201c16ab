"""
Calico 차단 NetworkPolicy 생성 로직
워크로드 A와 B 사이의 ingress / egress 트래픽을 Deny 규칙으로 차단
"""
import logging
import uuid
from typing import Any, Dict, Optional

from core.config import settings
from models.network_policy import DenyNetworkRequest
from utils.selectors import render_selector

logger = logging.getLogger(__name__)


def build_deny_policy(
    request: DenyNetworkRequest,
    namespace_labels: Optional[Dict[str, str]],
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """projectcalico.org/v3 NetworkPolicy 매니페스트 생성

    Args:
        request: 차단 요청 (A = 정책 대상, B = 차단 상대)
        namespace_labels: B 네임스페이스 객체의 라벨
        name: 정책 이름 (없으면 uuid로 생성)
    """
    if name is None:
        name = f"{settings.DENY_POLICY_PREFIX}{uuid.uuid4()}"

    peer = {
        "selector": render_selector(request.workload_b.labels),
        "namespaceSelector": render_selector(namespace_labels),
    }
    logger.debug(f"Peer selector: {peer['selector']!r}, namespace selector: {peer['namespaceSelector']!r}")

    return {
        "apiVersion": f"{settings.CALICO_GROUP}/{settings.CALICO_VERSION}",
        "kind": "NetworkPolicy",
        "metadata": {
            "name": name,
            "namespace": request.workload_a.namespace,
        },
        "spec": {
            "selector": render_selector(request.workload_a.labels),
            "ingress": [{"action": "Deny", "source": dict(peer)}],
            "egress": [{"action": "Deny", "destination": dict(peer)}],
        },
    }


class DenyPolicyBuilder:
    """차단 정책 생성기

    core_v1: Namespace 조회용 CoreV1Api
    custom_objects: Calico 리소스 생성용 CustomObjectsApi
    """

    def __init__(self, core_v1, custom_objects):
        self.core_v1 = core_v1
        self.custom_objects = custom_objects

    def create_deny_policy(self, request: DenyNetworkRequest) -> str:
        """B의 네임스페이스 라벨을 조회해 정책을 만들고 A의 네임스페이스에 생성

        같은 요청을 반복하면 이름이 다른 정책이 매번 새로 생성된다.

        Returns:
            str: 생성된 정책 이름

        Raises:
            ApiException: Namespace 조회 또는 정책 생성 실패 시
        """
        namespace_b = self.core_v1.read_namespace(request.workload_b.namespace)

        policy = build_deny_policy(request, namespace_b.metadata.labels)
        namespace = policy["metadata"]["namespace"]

        result = self.custom_objects.create_namespaced_custom_object(
            group=settings.CALICO_GROUP,
            version=settings.CALICO_VERSION,
            namespace=namespace,
            plural=settings.CALICO_NETWORK_POLICY_PLURAL,
            body=policy,
        )

        name = ((result or {}).get("metadata") or {}).get("name") or policy["metadata"]["name"]
        logger.info(f"NetworkPolicy created: {namespace}/{name}")
        return name
