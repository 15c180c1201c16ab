"""
Cluster related Pydantic models
"""
from typing import List
from pydantic import BaseModel


class DeploymentInfo(BaseModel):
    """Deployment 레플리카 상태 스냅샷"""
    deployment_name: str
    requested_pods: int  # spec.replicas
    ready_pods: int  # status.readyReplicas


class ClusterDeploymentsInfo(BaseModel):
    """클러스터 전체 Deployment 상태 (ready / failed)"""
    ready_deployments: List[DeploymentInfo] = []
    failed_deployments: List[DeploymentInfo] = []
