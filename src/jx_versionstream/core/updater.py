"""Bulk updates of stable version files."""

from __future__ import annotations

import glob
import logging
from pathlib import Path

from jx_versionstream.core.exceptions import VersionStreamError
from jx_versionstream.core.version_store import (
    load_stable_version,
    load_stable_version_file,
    save_stable_version,
    save_stable_version_file,
)
from jx_versionstream.models import VersionKind

logger = logging.getLogger(__name__)


def update_stable_version_files(glob_pattern: str, version: str, *exclude_files: str) -> list[str]:
    """Set ``version`` on every record file matching ``glob_pattern``.

    Files whose base name is in ``exclude_files``, that have no version, or
    that are already on ``version`` are left alone. Returns the old versions
    that were replaced. Any load or save failure aborts the whole update.
    """
    try:
        files = sorted(glob.glob(glob_pattern))
    except (OSError, ValueError) as e:
        raise VersionStreamError(f"failed to create glob from pattern {glob_pattern}: {e}") from e

    answer: list[str] = []
    for path in files:
        if Path(path).name in exclude_files:
            continue
        try:
            data = load_stable_version_file(path)
        except VersionStreamError as e:
            raise VersionStreamError(f"failed to load old version info for {path}: {e}") from e
        if not data.version or data.version == version:
            continue
        answer.append(data.version)
        data.version = version
        try:
            save_stable_version_file(path, data)
        except VersionStreamError as e:
            raise VersionStreamError(f"failed to save version info for {path}: {e}") from e
        logger.info("updated %s from %s to %s", path, answer[-1], version)
    return answer


def update_stable_version(versions_dir: str | Path, kind: str | VersionKind, name: str, version: str) -> list[str]:
    """Set ``version`` on the record for ``kind``/``name``.

    Returns the replaced version, or an empty list if it was already on
    ``version``. A missing record is created.
    """
    kind = VersionKind.parse(kind)
    data = load_stable_version(versions_dir, kind, name)
    if data.version == version:
        return []
    old = data.version
    data.version = version
    try:
        save_stable_version(versions_dir, kind, name, data)
    except VersionStreamError as e:
        raise VersionStreamError(f"failed to save versionstream file: {e}") from e
    logger.info("updated %s %s from %s to %s", kind.value, name, old or "(none)", version)
    return [old]
