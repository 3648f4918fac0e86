"""jx-versions update - Change locked versions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.updater import update_stable_version, update_stable_version_files
from jx_versionstream.models import VersionKind

app = typer.Typer()
console = Console()


@app.callback(invoke_without_command=True)
def update(
    version: str = typer.Option(..., "--version", "-v", help="The new version"),
    kind: Optional[VersionKind] = typer.Option(None, "--kind", "-k", help="Kind of version to update"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Name to update, e.g. 'jenkins-x/prow'"),
    glob_pattern: Optional[str] = typer.Option(
        None, "--glob", "-g", help="Update every version file matching this glob instead of a single name",
    ),
    exclude: Optional[list[str]] = typer.Option(None, "--exclude", "-x", help="File names to skip with --glob"),
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """Update a single version, or every version file matching a glob.

    Relative glob patterns are resolved against the versions directory.
    """
    directory = versions_dir_or_default(versions_dir)
    with exit_on_error():
        if glob_pattern:
            pattern = str(directory / glob_pattern)
            old_versions = update_stable_version_files(pattern, version, *(exclude or []))
        elif kind is not None and name:
            old_versions = update_stable_version(directory, kind, name, version)
        else:
            typer.echo("Either --glob or both --kind and --name are required.", err=True)
            raise typer.Exit(code=1)

    if not old_versions:
        console.print(f"[dim]Nothing to update, already on {version}[/dim]")
        return
    for old in old_versions:
        console.print(f"{old or '(none)'} -> [bold]{version}[/bold]")
