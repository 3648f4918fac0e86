"""jx-versions verify <name=version>... - Verify package versions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.resolver import VersionResolver

app = typer.Typer()
console = Console()


def _parse_packages(values: list[str]) -> dict[str, str]:
    packages: dict[str, str] = {}
    for value in values:
        name, sep, version = value.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected NAME=VERSION but got '{value}'")
        packages[name] = version
    return packages


@app.callback(invoke_without_command=True)
def verify(
    packages: list[str] = typer.Argument(help="Packages to verify as NAME=VERSION, e.g. helm=2.12.2"),
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """Verify installed package versions against the locked versions."""
    resolver = VersionResolver(versions_dir_or_default(versions_dir))
    parsed = _parse_packages(packages)
    with exit_on_error():
        resolver.verify_packages(parsed)
    console.print(f"[green]{len(parsed)} package(s) verified[/green]")
