"""
Deployment 상태 관련 비즈니스 로직
전체 네임스페이스의 Deployment를 조회하여 ready / failed로 분류
"""
import logging

from models.cluster import DeploymentInfo, ClusterDeploymentsInfo

logger = logging.getLogger(__name__)


class DeploymentHealthReporter:
    """Deployment 레플리카 상태 리포터"""

    def __init__(self, apps_v1):
        self.apps_v1 = apps_v1

    def report(self) -> ClusterDeploymentsInfo:
        """모든 네임스페이스의 Deployment 상태 조회

        요청 레플리카 수 <= ready 레플리카 수이면 ready, 아니면 failed.
        순서는 API 서버가 반환한 순서를 유지한다.

        Returns:
            ClusterDeploymentsInfo: ready / failed Deployment 목록

        Raises:
            ApiException: Deployment 목록 조회 실패 시 (부분 결과 없음)
        """
        deployments = self.apps_v1.list_deployment_for_all_namespaces()

        result = ClusterDeploymentsInfo()
        for deploy in deployments.items:
            info = DeploymentInfo(
                deployment_name=deploy.metadata.name,
                requested_pods=deploy.spec.replicas,
                ready_pods=(deploy.status.ready_replicas if deploy.status else None) or 0,
            )

            if info.requested_pods <= info.ready_pods:
                result.ready_deployments.append(info)
            else:
                result.failed_deployments.append(info)

        logger.info(
            f"Deployments: {len(result.ready_deployments)} ready, "
            f"{len(result.failed_deployments)} failed"
        )
        return result
