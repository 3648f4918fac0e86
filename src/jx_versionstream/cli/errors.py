"""Turn version stream errors into CLI exit codes."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from jx_versionstream.core.exceptions import VersionStreamError


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report a VersionStreamError on stderr and exit with status 1."""
    try:
        yield
    except VersionStreamError as e:
        typer.secho(f"error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e
