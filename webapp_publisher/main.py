"""Process entry point: publish the configured resources and report an exit code."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from webapp_publisher.modules.deployment.domain import PublishError

from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .settings import Settings, get_settings

log = logging.getLogger(__name__)


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    log.info("%s %s starting", settings.app_name, settings.version)
    container = ServiceContainer(settings)
    try:
        records = container.run()
    except PublishError as exc:
        log.error("Publish failed: %s", exc)
        return 1
    log.info("Publish succeeded for %d resource mapping(s)", len(records))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
