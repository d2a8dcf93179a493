from .retry import RetryingInvoker
from .target import DeployTarget, KuduDeployTarget

__all__ = [
    "RetryingInvoker",
    "DeployTarget",
    "KuduDeployTarget",
]
