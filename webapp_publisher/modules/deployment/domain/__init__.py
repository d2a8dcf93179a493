from .bindings import Binding, BindingKind, get_binding, get_http_out_binding
from .errors import ConfigurationError, DeployExhaustedError, PublishError, StagingEmptyError
from .models import PublishRecord, ResourceMapping, StagedResource

__all__ = [
    "Binding",
    "BindingKind",
    "get_binding",
    "get_http_out_binding",
    "PublishError",
    "ConfigurationError",
    "StagingEmptyError",
    "DeployExhaustedError",
    "ResourceMapping",
    "StagedResource",
    "PublishRecord",
]
