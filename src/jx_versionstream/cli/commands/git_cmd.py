"""jx-versions git <url> - Resolve a git repository version."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.resolver import VersionResolver

app = typer.Typer()


@app.callback(invoke_without_command=True)
def git(
    url: str = typer.Argument(help="Git repository URL"),
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """Print the locked version of a git repository."""
    resolver = VersionResolver(versions_dir_or_default(versions_dir))
    with exit_on_error():
        version = resolver.resolve_git_version(url)
    if not version:
        raise typer.Exit(code=1)
    typer.echo(version)
