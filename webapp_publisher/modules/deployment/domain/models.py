"""Dataclasses describing resources moving through the publish pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_INCLUDES


@dataclass
class ResourceMapping:
    """A source directory plus the files selected from it and their remote sub-path."""

    directory: str
    includes: List[str] = field(default_factory=lambda: list(DEFAULT_INCLUDES))
    excludes: List[str] = field(default_factory=list)
    target_path: Optional[str] = None


@dataclass
class StagedResource:
    directory: Path
    target_path: Optional[str] = None
    files: List[str] = field(default_factory=list)


@dataclass
class PublishRecord:
    staging_dir: Path
    target_path: Optional[str] = None
    war_files: List[str] = field(default_factory=list)
    bundle_path: Optional[Path] = None
    prepare_time_secs: float = 0.0
    deploy_time_secs: float = 0.0
    success: bool = False

    def mark_success(self, bundle_path: Path) -> None:
        self.bundle_path = bundle_path
        self.success = True
