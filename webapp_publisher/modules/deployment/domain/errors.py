"""Exception hierarchy raised by the publish pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence


class PublishError(RuntimeError):
    """Base class for every fatal publish failure."""


class ConfigurationError(PublishError):
    """Raised when the deployment configuration cannot be used."""


class StagingEmptyError(PublishError):
    """Raised when a staging directory is missing or holds nothing to publish."""

    def __init__(self, staging_dir: Path) -> None:
        self.staging_dir = Path(staging_dir)
        super().__init__(f"Staging directory: '{self.staging_dir.absolute()}' is empty.")


class DeployExhaustedError(PublishError):
    """Raised once every attempt of a deploy operation has failed."""

    def __init__(
        self,
        attempts: int,
        *,
        operation: str = "deploy",
        message: Optional[str] = None,
        causes: Optional[Sequence[BaseException]] = None,
    ) -> None:
        self.attempts = attempts
        self.operation = operation
        self.causes: List[BaseException] = list(causes or [])
        super().__init__(message or f"The {operation} failed after {attempts} times of retry.")
