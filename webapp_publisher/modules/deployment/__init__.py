"""Deployment module exports."""

from .deploy import DeployTarget, KuduDeployTarget, RetryingInvoker
from .service import ArtifactHandler
from .staging import ResourceStager

__all__ = [
    "ArtifactHandler",
    "DeployTarget",
    "KuduDeployTarget",
    "ResourceStager",
    "RetryingInvoker",
]
