"""Zip helpers for building the bundle uploaded by zip deploy."""

from __future__ import annotations

import logging
import os
import tempfile
import zipfile
from pathlib import Path

log = logging.getLogger(__name__)


def pack_directory(source_dir: Path, zip_path: Path) -> Path:
    """Write every file under ``source_dir`` into ``zip_path`` using relative POSIX names."""
    source_dir = Path(source_dir)
    zip_path = Path(zip_path)
    count = 0
    with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False) as zf:
        for path in sorted(source_dir.rglob("*")):
            if path.is_file():
                zf.write(path, path.relative_to(source_dir).as_posix())
                count += 1
    log.info("Packed %d file(s) from %s into %s", count, source_dir, zip_path)
    return zip_path


def remove_entry(zip_path: Path, entry_name: str) -> bool:
    """Drop ``entry_name`` from the archive; returns False when it was not there."""
    zip_path = Path(zip_path)
    with zipfile.ZipFile(zip_path) as src:
        if entry_name not in src.namelist():
            return False
        fd, tmp_name = tempfile.mkstemp(suffix=".zip", dir=zip_path.parent)
        os.close(fd)
        try:
            with zipfile.ZipFile(tmp_name, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False) as dst:
                for info in src.infolist():
                    if info.filename != entry_name:
                        dst.writestr(info, src.read(info.filename))
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    os.replace(tmp_name, zip_path)
    log.info("Removed entry %s from %s", entry_name, zip_path)
    return True
