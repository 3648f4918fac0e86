"""jx-versions repositories - Look up chart repository prefixes."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import OutputOption, VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.resolver import VersionResolver
from jx_versionstream.output.formatters import output_repositories

app = typer.Typer()


@app.callback(invoke_without_command=True)
def repositories(
    output: str = OutputOption,
    url: Optional[str] = typer.Option(None, "--url", help="Print the prefix of this repository URL"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Print the URLs of this prefix"),
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """Show the chart repository prefixes, or look one up."""
    resolver = VersionResolver(versions_dir_or_default(versions_dir))
    with exit_on_error():
        prefixes = resolver.get_repository_prefixes()

    if url:
        found = prefixes.prefix_for_url(url)
        if not found:
            typer.echo(f"No prefix found for '{url}'.", err=True)
            raise typer.Exit(code=1)
        typer.echo(found)
        return
    if prefix:
        urls = prefixes.urls_for_prefix(prefix)
        if not urls:
            typer.echo(f"No URLs found for prefix '{prefix}'.", err=True)
            raise typer.Exit(code=1)
        for u in urls:
            typer.echo(u)
        return
    output_repositories(prefixes, output)
