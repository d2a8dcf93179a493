"""Copy declared resources into per-mapping temporary staging directories."""

from __future__ import annotations

import logging
import re
import shutil
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from webapp_publisher.modules.deployment.domain import ConfigurationError, PublishError, ResourceMapping, StagedResource
from webapp_publisher.modules.deployment.domain.constants import DEFAULT_STAGING_PREFIX

NO_RESOURCES_MESSAGE = "The element <resources> inside deployment has to be set to do deploy."


def ensure_mappings(mappings: Optional[Sequence[ResourceMapping]]) -> Sequence[ResourceMapping]:
    if not mappings:
        raise ConfigurationError(NO_RESOURCES_MESSAGE)
    return mappings


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    """Translate an Ant-style glob into a regex over POSIX relative paths.

    ``*`` and ``?`` stay within one path segment, ``**`` spans any depth and
    a leading ``**/`` also matches top-level entries. A trailing ``/`` selects
    everything below that directory.
    """
    if pattern.endswith("/"):
        pattern += "**"
    parts: List[str] = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            parts.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(parts))


def matches_any(relative: str, patterns: Iterable[str]) -> bool:
    return any(compile_pattern(pattern).fullmatch(relative) for pattern in patterns)


class ResourceStager:
    """Stages each resource mapping into its own fresh temporary directory.

    Staging directories are never removed here; the caller (or the OS temp
    cleaner) owns their lifetime.
    """

    def __init__(self, prefix: str = DEFAULT_STAGING_PREFIX, temp_root: Optional[Path] = None) -> None:
        self.prefix = prefix
        self.temp_root = Path(temp_root) if temp_root else None
        self.log = logging.getLogger(self.__class__.__name__)

    def stage(self, mappings: Optional[Sequence[ResourceMapping]]) -> List[StagedResource]:
        return [self.stage_one(mapping) for mapping in ensure_mappings(mappings)]

    def stage_one(self, mapping: ResourceMapping) -> StagedResource:
        try:
            staging_dir = Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.temp_root))
        except OSError as exc:
            raise PublishError(f"Failed to create staging directory: {exc}") from exc
        staged = StagedResource(directory=staging_dir, target_path=mapping.target_path)
        source = Path(mapping.directory)
        if not source.is_dir():
            self.log.warning("Resource directory %s does not exist, nothing staged", source)
            return staged

        try:
            self._copy_selected(source, staging_dir, mapping, staged)
        except OSError as exc:
            raise PublishError(f"Failed to stage resources from {source} into {staging_dir}: {exc}") from exc

        self.log.info(
            "Staged %d file(s) from %s into %s targetPath=%s",
            len(staged.files),
            source,
            staging_dir,
            mapping.target_path or "-",
        )
        return staged

    @staticmethod
    def _copy_selected(source: Path, staging_dir: Path, mapping: ResourceMapping, staged: StagedResource) -> None:
        for path in sorted(source.rglob("*")):
            if not path.is_file():
                continue
            relative = path.relative_to(source).as_posix()
            if not matches_any(relative, mapping.includes or ()):
                continue
            if matches_any(relative, mapping.excludes or ()):
                continue
            dest = staging_dir / relative
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, dest)
            staged.files.append(relative)
