"""
Pytest configuration and fixtures
"""
import os
import sys
import pytest
from typing import Generator, AsyncGenerator
from unittest.mock import MagicMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport


# ============================================
# App Fixtures
# ============================================

@pytest.fixture(scope="session")
def app():
    """Create FastAPI app for testing"""
    from main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def client(app, mock_k8s_clients) -> Generator:
    """Synchronous test client"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app, mock_k8s_clients) -> AsyncGenerator:
    """Asynchronous test client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================
# Mock Fixtures
# ============================================

@pytest.fixture
def mock_k8s_clients(app):
    """Mock Kubernetes clients installed on app.state"""
    from core.kubernetes import K8sClients

    core_v1 = MagicMock()
    apps_v1 = MagicMock()
    custom_api = MagicMock()
    # 생성 요청 본문을 그대로 돌려주는 API 서버 흉내
    custom_api.create_namespaced_custom_object.side_effect = (
        lambda group, version, namespace, plural, body: body
    )

    app.state.k8s_clients = K8sClients(
        core_v1=core_v1, apps_v1=apps_v1, custom_objects=custom_api
    )
    yield {
        "core_v1": core_v1,
        "apps_v1": apps_v1,
        "custom_api": custom_api,
    }
    app.state.k8s_clients = None


# ============================================
# Data Fixtures
# ============================================

def make_deployment(name: str, replicas, ready_replicas):
    """V1Deployment 대역 (metadata.name, spec.replicas, status.ready_replicas)"""
    deploy = MagicMock()
    deploy.metadata.name = name
    deploy.spec.replicas = replicas
    deploy.status.ready_replicas = ready_replicas
    return deploy


def make_namespace(name: str, labels=None):
    """V1Namespace 대역"""
    ns = MagicMock()
    ns.metadata.name = name
    ns.metadata.labels = labels
    return ns


@pytest.fixture
def deployment_list():
    """Factory for list_deployment_for_all_namespaces() results"""
    def _build(*deployments):
        result = MagicMock()
        result.items = [make_deployment(*d) for d in deployments]
        return result
    return _build


@pytest.fixture
def sample_deny_request():
    """Sample deny network policy request body"""
    return {
        "workload_a": {"namespace": "frontend", "labels": {"app": "web"}},
        "workload_b": {"namespace": "backend", "labels": {"app": "db"}},
    }


@pytest.fixture
def backend_namespace():
    """Namespace "backend" labelled team=data"""
    return make_namespace("backend", {"team": "data"})
