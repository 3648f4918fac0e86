"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="jx-versions",
    help="Query and update the Jenkins X version stream.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False, markup=False)],
        force=True,
    )


def _register_commands() -> None:
    from jx_versionstream.cli.commands.get_cmd import app as get_app
    from jx_versionstream.cli.commands.image_cmd import app as image_app
    from jx_versionstream.cli.commands.git_cmd import app as git_app
    from jx_versionstream.cli.commands.verify_cmd import app as verify_app
    from jx_versionstream.cli.commands.update_cmd import app as update_app
    from jx_versionstream.cli.commands.list_cmd import app as list_app
    from jx_versionstream.cli.commands.quickstarts_cmd import app as quickstarts_app
    from jx_versionstream.cli.commands.repositories_cmd import app as repositories_app

    app.add_typer(get_app, name="get", help="Show the stable version of a chart, package, image or repository")
    app.add_typer(image_app, name="image", help="Resolve a docker image to its locked tag")
    app.add_typer(git_app, name="git", help="Resolve the locked version of a git repository")
    app.add_typer(verify_app, name="verify", help="Verify package versions against the version stream")
    app.add_typer(update_app, name="update", help="Update locked versions")
    app.add_typer(list_app, name="list", help="List all stable versions")
    app.add_typer(quickstarts_app, name="quickstarts", help="List the quickstart catalog")
    app.add_typer(repositories_app, name="repositories", help="Look up chart repository prefixes")


_register_commands()


def main() -> None:
    app()
