"""Load and save stable version records in a versions directory.

Each record lives at ``<versions_dir>/<kind>/<name>.yml``. Git records are
keyed by the normalized repository name (see ``git_url_to_name``). A missing
file is an empty record, never an error.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable

from jx_versionstream.config.settings import settings
from jx_versionstream.core.exceptions import VersionFileError, VersionStreamError
from jx_versionstream.models import KINDS, StableVersion, VersionKind
from jx_versionstream.utils.git_url import git_url_to_name
from jx_versionstream.utils.yaml_files import dump_yaml, load_yaml_file, parse_yaml, save_yaml_file

logger = logging.getLogger(__name__)

# Return False to stop visiting the remaining versions of a kind.
VersionCallback = Callable[[VersionKind, str, StableVersion], bool]


def version_path(versions_dir: str | Path, kind: VersionKind, name: str) -> Path:
    if kind is VersionKind.GIT:
        name = git_url_to_name(name)
    return Path(versions_dir) / kind.value / f"{name}{settings.file_extension}"


def _record_from(data: Any, path: Path | None = None) -> StableVersion:
    if data is not None and not isinstance(data, dict):
        source = path or "data"
        raise VersionFileError(f"expected a YAML mapping in {source} but found {type(data).__name__}", path)
    try:
        return StableVersion.from_dict(data)
    except VersionFileError as e:
        if path is None:
            raise
        raise VersionFileError(f"{e} in {path}", path) from e


def load_stable_version_from_data(data: str | bytes) -> StableVersion:
    """Parse a stable version record from YAML text."""
    return _record_from(parse_yaml(data))


def load_stable_version_file(path: str | Path) -> StableVersion:
    path = Path(path)
    return _record_from(load_yaml_file(path), path)


def load_stable_version(versions_dir: str | Path, kind: VersionKind, name: str) -> StableVersion:
    """Load the stable version for the given kind and name.

    Returns an empty record if nothing has been locked for it.
    """
    return load_stable_version_file(version_path(versions_dir, kind, name))


def load_stable_version_number(versions_dir: str | Path, kind: VersionKind, name: str) -> str:
    """Load just the version number, warning with a lock hint when there is none."""
    version = load_stable_version(versions_dir, kind, name).version
    if version:
        logger.debug("using stable version %s from %s of %s from %s", version, kind.value, name, versions_dir)
        return version
    # the chart in the current directory is never locked
    if kind is VersionKind.CHART and name == ".":
        return version
    logger.warning(
        "could not find a stable version from %s of %s from %s\nFor background see: %s",
        kind.value, name, versions_dir, settings.docs_url,
    )
    logger.info("Please lock this version down via the command: %s", settings.lock_hint(kind.value, name))
    return version


def save_stable_version_file(path: str | Path, record: StableVersion) -> None:
    save_yaml_file(Path(path), record.to_dict())


def save_stable_version(versions_dir: str | Path, kind: VersionKind, name: str, record: StableVersion) -> None:
    """Write the record to its file, replacing any existing content."""
    save_stable_version_file(version_path(versions_dir, kind, name), record)


def marshal_stable_version(record: StableVersion) -> str:
    return dump_yaml(record.to_dict())


def name_from_path(base_path: str | Path, path: str | Path) -> str:
    """Convert a record file path into its name relative to the kind directory."""
    try:
        rel = Path(path).relative_to(base_path)
    except ValueError as e:
        raise VersionStreamError(f"failed to extract base path {base_path} from {path}") from e
    if rel.suffix:
        rel = rel.with_suffix("")
    return rel.as_posix()


def _record_files(kind_dir: Path) -> list[Path]:
    answer = []
    for root, dirs, files in os.walk(kind_dir):
        dirs.sort()
        for f in sorted(files):
            if f.endswith(settings.file_extension):
                answer.append(Path(root) / f)
    return answer


def for_each_kind_version(versions_dir: str | Path, kind: VersionKind, callback: VersionCallback) -> None:
    """Call ``callback`` for every version record of the given kind, in path order."""
    kind_dir = Path(versions_dir) / kind.value
    skip = Path(versions_dir) / settings.repositories_file
    for path in _record_files(kind_dir):
        if path == skip:
            continue
        record = load_stable_version_file(path)
        name = name_from_path(kind_dir, path)
        try:
            keep_going = callback(kind, name, record)
        except VersionStreamError as e:
            raise VersionStreamError(f"failed to process kind {kind.value} name {name}: {e}") from e
        if not keep_going:
            break


def for_each_version(versions_dir: str | Path, callback: VersionCallback) -> None:
    """Call ``callback`` for every version record of every kind."""
    for kind in KINDS:
        for_each_kind_version(versions_dir, kind, callback)
