"""Stage declared resources and push them through war deploy and zip deploy."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence

from webapp_publisher.modules.deployment.deploy import DeployTarget, RetryingInvoker
from webapp_publisher.modules.deployment.domain import PublishError, PublishRecord, ResourceMapping, StagingEmptyError
from webapp_publisher.modules.deployment.domain.constants import LOCAL_SETTINGS_FILE, WAR_EXTENSION, ZIP_SUFFIX
from webapp_publisher.modules.deployment.staging import ResourceStager, ensure_mappings

from .archive import pack_directory, remove_entry


def file_extension(name: str) -> str:
    dot = name.rfind(".")
    return "" if dot == -1 else name[dot + 1:]


class ArtifactHandler:
    """Publishes staged resources to a deploy target.

    For every mapping the resources are copied into a fresh staging
    directory. Top-level ``.war`` files are deployed one by one through war
    deploy and removed; whatever remains (possibly nothing) is zipped,
    stripped of the local settings file and sent through zip deploy. Both
    remote calls go through :class:`RetryingInvoker`. Mappings run in order
    and the first failure aborts the rest.
    """

    def __init__(
        self,
        stager: ResourceStager,
        invoker: RetryingInvoker,
        *,
        excluded_entry: str = LOCAL_SETTINGS_FILE,
    ) -> None:
        self.stager = stager
        self.invoker = invoker
        self.excluded_entry = excluded_entry
        self.log = logging.getLogger(self.__class__.__name__)

    def publish(
        self,
        target: DeployTarget,
        mappings: Optional[Sequence[ResourceMapping]],
    ) -> List[PublishRecord]:
        records: List[PublishRecord] = []
        for mapping in ensure_mappings(mappings):
            start = time.perf_counter()
            staged = self.stager.stage_one(mapping)
            prepare_secs = time.perf_counter() - start
            record = self.do_publish(target, staged.directory, staged.target_path)
            record.prepare_time_secs = prepare_secs
            records.append(record)
        self.log.info("Published %d resource mapping(s)", len(records))
        return records

    def do_publish(
        self,
        target: DeployTarget,
        staging_dir: Path,
        target_path: Optional[str] = None,
    ) -> PublishRecord:
        staging_dir = Path(staging_dir).resolve()
        if not staging_dir.is_dir() or not any(staging_dir.iterdir()):
            raise StagingEmptyError(staging_dir)

        record = PublishRecord(staging_dir=staging_dir, target_path=target_path)
        start = time.perf_counter()
        for entry in sorted(staging_dir.iterdir()):
            if entry.is_file() and file_extension(entry.name).lower() == WAR_EXTENSION:
                self.publish_via_war_deploy(target, entry, target_path)
                try:
                    entry.unlink()
                except OSError as exc:
                    raise PublishError(f"Failed to remove deployed war file {entry}: {exc}") from exc
                record.war_files.append(entry.name)

        bundle = self.publish_via_zip_deploy(target, staging_dir)
        record.deploy_time_secs = time.perf_counter() - start
        record.mark_success(bundle)
        self.log.info(
            "Publish finished staging=%s wars=%s bundle=%s duration=%.2fs",
            staging_dir,
            record.war_files,
            bundle,
            record.deploy_time_secs,
        )
        return record

    def publish_via_zip_deploy(self, target: DeployTarget, source_dir: Path) -> Path:
        source_dir = Path(source_dir).resolve()
        zip_file = Path(str(source_dir) + ZIP_SUFFIX)
        try:
            pack_directory(source_dir, zip_file)
            remove_entry(zip_file, self.excluded_entry)
        except OSError as exc:
            raise PublishError(f"Failed to package {source_dir} into {zip_file}: {exc}") from exc

        self.invoker.invoke(
            lambda: target.zip_deploy(zip_file),
            description="deploying the zip package",
            failure_message="The zip deploy failed after {attempts} times of retry.",
            log_level=logging.DEBUG,
        )
        return zip_file

    def publish_via_war_deploy(
        self,
        target: DeployTarget,
        war: Path,
        context_path: Optional[str] = None,
    ) -> None:
        self.log.info("Deploying the war file: %s...", war.name)
        self.invoker.invoke(
            lambda: target.war_deploy(war, context_path),
            description="deploying war file to server",
            failure_message="Failed to deploy the war file after {attempts} times of retry.",
            log_level=logging.INFO,
        )
