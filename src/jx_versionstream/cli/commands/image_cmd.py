"""jx-versions image <image> - Resolve a docker image tag."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from jx_versionstream.cli.errors import exit_on_error
from jx_versionstream.cli.options import VersionsDirOption, versions_dir_or_default
from jx_versionstream.core.resolver import VersionResolver

app = typer.Typer()


@app.callback(invoke_without_command=True)
def image(
    images: list[str] = typer.Argument(help="Docker images, with or without a tag"),
    versions_dir: Optional[Path] = VersionsDirOption,
) -> None:
    """Print each image with the tag locked in the version stream."""
    resolver = VersionResolver(versions_dir_or_default(versions_dir))
    with exit_on_error():
        for img in images:
            typer.echo(resolver.resolve_docker_image(img))
