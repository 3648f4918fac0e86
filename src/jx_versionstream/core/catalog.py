"""Repository prefixes and quickstarts stored in the versions directory."""

from __future__ import annotations

import logging
from pathlib import Path

from jx_versionstream.config.settings import settings
from jx_versionstream.core.exceptions import VersionFileError
from jx_versionstream.models.quickstart import QuickStarts
from jx_versionstream.models.repo import RepositoryPrefixes
from jx_versionstream.utils.yaml_files import load_yaml_file, save_yaml_file

logger = logging.getLogger(__name__)


def _load_mapping(path: Path) -> dict | None:
    data = load_yaml_file(path)
    if data is not None and not isinstance(data, dict):
        raise VersionFileError(f"expected a YAML mapping in {path} but found {type(data).__name__}", path)
    return data


def get_repository_prefixes(versions_dir: str | Path) -> RepositoryPrefixes:
    """Load charts/repositories.yml, returning an empty map if it is missing."""
    path = Path(versions_dir) / settings.repositories_file
    prefixes = RepositoryPrefixes.from_dict(_load_mapping(path))
    logger.debug("loaded %d repository prefixes from %s", len(prefixes.repositories), path)
    return prefixes


def get_quickstarts(versions_dir: str | Path) -> QuickStarts:
    """Load quickstarts.yml, returning an empty catalog if it is missing."""
    path = Path(versions_dir) / settings.quickstarts_file
    return QuickStarts.from_dict(_load_mapping(path))


def save_quickstarts(versions_dir: str | Path, quickstarts: QuickStarts) -> None:
    """Rewrite quickstarts.yml with the whole catalog."""
    save_yaml_file(Path(versions_dir) / settings.quickstarts_file, quickstarts.to_dict())
