"""YAML file reading and writing for the versions directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from jx_versionstream.config.settings import settings
from jx_versionstream.core.exceptions import VersionFileError

logger = logging.getLogger(__name__)

# Prefer the C-accelerated YAML loader when available.
_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)


def parse_yaml(data: str | bytes) -> Any:
    """Parse a YAML document, raising VersionFileError on malformed input."""
    try:
        return yaml.load(data, Loader=_YamlLoader)
    except yaml.YAMLError as e:
        raise VersionFileError(f"failed to unmarshal YAML: {e}") from e


def load_yaml_file(path: Path) -> Any:
    """Load a YAML file, returning None if it does not exist."""
    if not path.exists():
        return None
    try:
        data = path.read_bytes()
    except OSError as e:
        raise VersionFileError(f"failed to load YAML file {path}: {e}", path) from e
    try:
        return yaml.load(data, Loader=_YamlLoader)
    except yaml.YAMLError as e:
        raise VersionFileError(f"failed to unmarshal YAML for file {path}: {e}", path) from e


def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def save_yaml_file(path: Path, data: Any) -> None:
    """Write data as YAML, creating parent directories as needed."""
    text = dump_yaml(data)
    directory = path.parent
    try:
        directory.mkdir(mode=settings.write_permissions, parents=True, exist_ok=True)
    except OSError as e:
        raise VersionFileError(f"failed to create directory {directory}: {e}", directory) from e
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise VersionFileError(f"failed to write file {path}: {e}", path) from e
    logger.debug("wrote %s", path)
