"""Shared CLI options."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jx_versionstream.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
VersionsDirOption = typer.Option(
    None, "--versions-dir", "-d", help="Versions repository directory (default: $JX_VERSIONS_DIR or ~/.jx/jenkins-x-versions)",
)


def versions_dir_or_default(versions_dir: Optional[Path]) -> Path:
    return versions_dir if versions_dir is not None else settings.versions_dir
