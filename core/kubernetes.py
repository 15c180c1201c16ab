"""
Kubernetes client initialization and utilities

인증 방식 선택:
- kubeconfig 경로 지정: 해당 파일 사용
- 경로 없음: Pod 내부 ServiceAccount 토큰 (incluster_config),
  클러스터 밖이면 ~/.kube/config 로 폴백
"""
import logging
from typing import NamedTuple

from fastapi import Request
from kubernetes import client, config
from kubernetes.client.rest import ApiException

logger = logging.getLogger(__name__)


class K8sClients(NamedTuple):
    """프로세스 전역에서 공유하는 API 클라이언트 묶음"""
    core_v1: client.CoreV1Api
    apps_v1: client.AppsV1Api
    custom_objects: client.CustomObjectsApi


def load_k8s_config(kubeconfig: str = "") -> bool:
    """K8s 설정 로드

    Returns:
        bool: 클러스터 내부 config 사용 시 True, kube_config 사용 시 False
    """
    if kubeconfig:
        config.load_kube_config(config_file=kubeconfig)
        logger.info(f"K8s config loaded: kubeconfig ({kubeconfig})")
        return False

    try:
        config.load_incluster_config()
        logger.info("K8s config loaded: in-cluster (ServiceAccount)")
        return True
    except config.ConfigException as e:
        logger.warning(f"In-cluster config failed: {e}, falling back to kubeconfig")

    config.load_kube_config()
    logger.info("K8s config loaded: kubeconfig (~/.kube/config)")
    return False


def connect_k8s_clients(kubeconfig: str = "") -> K8sClients:
    """Kubernetes API 클라이언트 초기화 및 연결 확인

    API 서버 버전 조회로 연결과 인증을 검증한다. 실패하면 예외를 그대로
    전파하므로 서버 시작 단계에서 프로세스가 중단된다.

    Returns:
        K8sClients: (CoreV1Api, AppsV1Api, CustomObjectsApi)
        - CoreV1Api: Namespace 조회
        - AppsV1Api: Deployment 조회
        - CustomObjectsApi: Calico NetworkPolicy 생성

    Raises:
        ConfigException: 설정 로드 실패 시
        ApiException: API 서버 연결/인증 실패 시
    """
    in_cluster = load_k8s_config(kubeconfig)

    version = client.VersionApi().get_code()
    logger.info(
        f"Connected to Kubernetes {version.git_version} "
        f"({'in-cluster' if in_cluster else 'kubeconfig'})"
    )

    return K8sClients(
        core_v1=client.CoreV1Api(),
        apps_v1=client.AppsV1Api(),
        custom_objects=client.CustomObjectsApi(),
    )


def get_k8s_clients(request: Request) -> K8sClients:
    """시작 시 생성된 클라이언트를 반환 (FastAPI dependency)"""
    return request.app.state.k8s_clients


__all__ = [
    'K8sClients',
    'load_k8s_config',
    'connect_k8s_clients',
    'get_k8s_clients',
    'ApiException',
]
