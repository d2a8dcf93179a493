"""Service wiring for the publish pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from webapp_publisher.modules.deployment import (
    ArtifactHandler,
    DeployTarget,
    KuduDeployTarget,
    ResourceStager,
    RetryingInvoker,
)
from webapp_publisher.modules.deployment.domain import ConfigurationError, PublishRecord
from webapp_publisher.modules.deployment.staging import ensure_mappings

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    stager: ResourceStager = field(init=False)
    invoker: RetryingInvoker = field(init=False)
    artifact_handler: ArtifactHandler = field(init=False)

    def __post_init__(self) -> None:
        self.stager = ResourceStager(prefix=self.settings.staging_prefix)
        self.invoker = RetryingInvoker(self.settings.max_retry_attempts)
        self.artifact_handler = ArtifactHandler(
            self.stager,
            self.invoker,
            excluded_entry=self.settings.excluded_entry,
        )

    def build_target(self) -> KuduDeployTarget:
        if not self.settings.scm_url:
            raise ConfigurationError("scm_url is required to reach the deploy endpoint")
        return KuduDeployTarget(
            self.settings.scm_url,
            username=self.settings.deploy_username,
            password=self.settings.deploy_password,
            timeout=self.settings.http_timeout,
            verify=self.settings.verify_ssl,
        )

    def run(self, target: Optional[DeployTarget] = None) -> List[PublishRecord]:
        """Publish the configured resources; builds the HTTP target when none is given."""
        resources = ensure_mappings(self.settings.resources)
        if target is not None:
            return self.artifact_handler.publish(target, resources)
        with self.build_target() as kudu:
            log.info("Publishing %d resource mapping(s) to %s", len(resources), kudu.scm_url)
            return self.artifact_handler.publish(kudu, resources)
