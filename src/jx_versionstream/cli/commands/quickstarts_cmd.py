"""jx-versions quickstarts - List the quickstart catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import OutputOption, VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.catalog import get_quickstarts
from jx_versionstream.output.formatters import output_quickstarts

app = typer.Typer()


@app.callback(invoke_without_command=True)
def quickstarts(
    output: str = OutputOption,
    sort: bool = typer.Option(True, "--sort/--no-sort", help="Sort by name then owner"),
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """List the quickstarts with missing owners, IDs and download URLs filled in."""
    with exit_on_error():
        qs = get_quickstarts(versions_dir_or_default(versions_dir))
    qs.default_missing_values()
    if sort:
        qs.sort()
    output_quickstarts(qs, output)
