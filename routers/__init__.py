"""
API Routers

- health         : /healthz
- deployments    : /clusterdeploymentsinfo
- network_policy : /denyNetworkPolicy
"""
from .health import router as health_router
from .deployments import router as deployments_router
from .network_policy import router as network_policy_router

__all__ = [
    'health_router',
    'deployments_router',
    'network_policy_router',
]
