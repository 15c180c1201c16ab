# Core module - configuration, cluster clients
from .config import settings, parse_listen_address
from .kubernetes import K8sClients, connect_k8s_clients, get_k8s_clients

__all__ = [
    'settings',
    'parse_listen_address',
    'K8sClients',
    'connect_k8s_clients',
    'get_k8s_clients',
]
