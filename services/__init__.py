# Services - 비즈니스 로직
from .deployments import DeploymentHealthReporter
from .network_policy import DenyPolicyBuilder, build_deny_policy

__all__ = ['DeploymentHealthReporter', 'DenyPolicyBuilder', 'build_deny_policy']
