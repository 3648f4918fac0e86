"""Rich table builders for each command."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from jx_versionstream.models import StableVersion, VersionKind
from jx_versionstream.models.quickstart import QuickStarts
from jx_versionstream.models.repo import RepositoryPrefixes
from jx_versionstream.output.themes import styled_kind, styled_version


def stable_version_panel(kind: VersionKind, name: str, record: StableVersion) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Kind", styled_kind(kind))
    table.add_row("Name", escape(name))
    table.add_row("Version", styled_version(record.version))
    table.add_row("Upper Limit", record.upper_limit or "-")
    if record.git_url:
        table.add_row("Git URL", record.git_url)
    if record.component:
        table.add_row("Component", record.component)
    if record.url:
        table.add_row("URL", record.url)

    return Panel(table, title=f"[bold]Stable Version: {escape(name)}[/bold]", border_style="blue")


def version_list_table(entries: list[tuple[VersionKind, str, StableVersion]]) -> Table:
    table = Table(title="Stable Versions", expand=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Version", no_wrap=True)
    table.add_column("Upper Limit", style="dim", no_wrap=True)
    table.add_column("Git URL", style="dim", max_width=40)

    for kind, name, record in entries:
        table.add_row(
            styled_kind(kind),
            escape(name),
            styled_version(record.version),
            record.upper_limit,
            record.git_url,
        )
    return table


def quickstarts_table(qs: QuickStarts) -> Table:
    table = Table(title="Quickstarts", expand=True)
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Owner", style="cyan")
    table.add_column("Version", style="magenta")
    table.add_column("Language", style="green")
    table.add_column("Framework")
    table.add_column("Tags", style="dim")

    for q in qs.quickstarts:
        table.add_row(q.name, q.owner, q.version, q.language, q.framework, ", ".join(q.tags))
    return table


def repositories_table(prefixes: RepositoryPrefixes) -> Table:
    table = Table(title="Chart Repositories", expand=True)
    table.add_column("Prefix", style="bold cyan", no_wrap=True)
    table.add_column("URLs")
    for repo in prefixes.repositories:
        table.add_row(repo.prefix, "\n".join(repo.urls))
    return table
