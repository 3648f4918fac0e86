"""jx-versions list - List stable versions."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Optional

import typer

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import OutputOption, VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.version_store import for_each_kind_version, for_each_version
from jx_versionstream.models import StableVersion, VersionKind
from jx_versionstream.output.formatters import output_versions

app = typer.Typer()


def _matches(name: str, includes: list[str], excludes: list[str]) -> bool:
    if includes and not any(fnmatch(name, p) for p in includes):
        return False
    return not any(fnmatch(name, p) for p in excludes)


@app.callback(invoke_without_command=True)
def list_versions(
    output: str = OutputOption,
    kind: Optional[VersionKind] = typer.Option(None, "--kind", "-k", help="Only list this kind of version"),
    filter: Optional[list[str]] = typer.Option(None, "--filter", "-f", help="Name patterns to include, e.g. 'jenkins-x/*'"),
    excludes: Optional[list[str]] = typer.Option(None, "--excludes", "-x", help="Name patterns to exclude"),
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """List the stable versions in the versions directory."""
    directory = versions_dir_or_default(versions_dir)
    entries: list[tuple[VersionKind, str, StableVersion]] = []

    def collect(k: VersionKind, name: str, record: StableVersion) -> bool:
        if _matches(name, filter or [], excludes or []):
            entries.append((k, name, record))
        return True

    with exit_on_error():
        if kind is None:
            for_each_version(directory, collect)
        else:
            for_each_kind_version(directory, kind, collect)
    output_versions(entries, output)
