"""
Cluster Deployments API Router
- 클러스터 전체 Deployment 상태 조회
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from core.kubernetes import K8sClients, get_k8s_clients
from models.cluster import ClusterDeploymentsInfo
from services.deployments import DeploymentHealthReporter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["deployments"])


def get_deployment_reporter(
    clients: K8sClients = Depends(get_k8s_clients),
) -> DeploymentHealthReporter:
    return DeploymentHealthReporter(clients.apps_v1)


@router.get("/clusterdeploymentsinfo", response_model=ClusterDeploymentsInfo)
def get_cluster_deployments_info(
    reporter: DeploymentHealthReporter = Depends(get_deployment_reporter),
):
    """모든 Deployment의 ready / failed 상태 조회"""
    try:
        return reporter.report()
    except Exception as e:
        logger.error(f"Failed to list deployments: {e}")
        raise HTTPException(status_code=500, detail=str(e))
