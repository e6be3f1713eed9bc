"""Workspace scanner — loads the JS/TS file snapshot the rules run over."""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path

from code_health.models import ScanConfig, ScannedFile, normalize_path

logger = logging.getLogger(__name__)


def scan_workspace(config: ScanConfig) -> list[ScannedFile]:
    """Read every eligible source file under the configured include dirs."""
    root = Path(config.source_dir)
    if not root.is_dir():
        raise ValueError(f"Source directory not found: {root}")
    root = root.resolve()

    files: dict[str, ScannedFile] = {}
    for include in config.include_dirs:
        base = root / include
        if not base.is_dir():
            continue
        for path in sorted(base.rglob("*")):
            if path.is_dir() or path.suffix not in config.extensions:
                continue
            rel = path.relative_to(root)
            if _should_skip(rel, config.skip_dirs):
                continue
            try:
                content = path.read_bytes().decode("utf-8", errors="replace")
            except OSError as e:
                logger.warning("Skipping unreadable file %s: %s", path, e)
                continue
            rel_path = normalize_path(str(rel))
            files[rel_path] = ScannedFile.from_text(str(path), rel_path, content)

    logger.info("Scanned %d file(s) under %s", len(files), root)
    return [files[key] for key in sorted(files)]


def _should_skip(rel: Path, skip_dirs: list[str]) -> bool:
    for part in rel.parts[:-1]:
        for pattern in skip_dirs:
            if fnmatch.fnmatch(part, pattern):
                return True
    return False
