"""
NetworkPolicy 요청 Pydantic 모델
"""
from typing import Dict
from pydantic import BaseModel


class WorkloadSelector(BaseModel):
    """네임스페이스 + 라벨로 식별되는 워크로드"""
    namespace: str
    labels: Dict[str, str]


class DenyNetworkRequest(BaseModel):
    """두 워크로드 간 트래픽 차단 요청

    workload_a: 정책 대상 (정책이 A의 네임스페이스에 생성됨)
    workload_b: 차단할 상대
    """
    workload_a: WorkloadSelector
    workload_b: WorkloadSelector


__all__ = [
    "WorkloadSelector",
    "DenyNetworkRequest",
]
