"""Remote deploy capabilities used by the publisher."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Protocol

import httpx

from webapp_publisher.modules.deployment.domain.constants import WAR_DEPLOY_PATH, ZIP_DEPLOY_PATH


class DeployTarget(Protocol):
    """What the publisher needs from a remote application host."""

    def zip_deploy(self, archive_file: Path) -> None:  # pragma: no cover - interface
        ...

    def war_deploy(self, archive_file: Path, context_path: Optional[str] = None) -> None:  # pragma: no cover - interface
        ...


class KuduDeployTarget:
    """Pushes archives to a Kudu-style SCM endpoint over HTTP."""

    def __init__(
        self,
        scm_url: str,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 600.0,
        verify: bool = True,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.scm_url = scm_url.rstrip("/")
        self._auth = (username, password or "") if username else None
        self._client = client or httpx.Client(timeout=timeout, verify=verify)
        self.log = logging.getLogger(self.__class__.__name__)

    def zip_deploy(self, archive_file: Path) -> None:
        self._upload(ZIP_DEPLOY_PATH, Path(archive_file), params={"isAsync": "false"})

    def war_deploy(self, archive_file: Path, context_path: Optional[str] = None) -> None:
        params = {"name": context_path} if context_path else None
        self._upload(WAR_DEPLOY_PATH, Path(archive_file), params=params)

    def _upload(self, api_path: str, archive_file: Path, *, params: Optional[dict] = None) -> None:
        url = f"{self.scm_url}{api_path}"
        size = archive_file.stat().st_size
        self.log.info("Uploading %s (%d bytes) -> %s params=%s", archive_file.name, size, url, params or {})
        start = time.perf_counter()
        with archive_file.open("rb") as fh:
            response = self._client.post(
                url,
                params=params,
                content=fh.read(),
                headers={"Content-Type": "application/octet-stream"},
                auth=self._auth,
            )
        response.raise_for_status()
        self.log.info(
            "Upload of %s finished status=%s duration=%.2fs",
            archive_file.name,
            response.status_code,
            time.perf_counter() - start,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "KuduDeployTarget":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
