# Pydantic models
from .cluster import DeploymentInfo, ClusterDeploymentsInfo
from .network_policy import WorkloadSelector, DenyNetworkRequest

__all__ = [
    # Cluster
    'DeploymentInfo', 'ClusterDeploymentsInfo',
    # Network policy
    'WorkloadSelector', 'DenyNetworkRequest',
]
