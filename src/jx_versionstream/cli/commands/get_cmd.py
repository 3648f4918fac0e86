"""jx-versions get <kind> <name> - Show a stable version record."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import OutputOption, VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.resolver import VersionResolver
from jx_versionstream.models import VersionKind
from jx_versionstream.output.formatters import output_stable_version

app = typer.Typer()


@app.callback(invoke_without_command=True)
def get(
    kind: VersionKind = typer.Argument(help="Kind of version: charts, packages, docker, git"),
    name: str = typer.Argument(help="Name of the chart, package, image or git URL"),
    output: str = OutputOption,
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """Show the stable version record for a kind and name."""
    resolver = VersionResolver(versions_dir_or_default(versions_dir))
    with exit_on_error():
        record = resolver.stable_version(kind, name)
    output_stable_version(kind, name, record, output)
