"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from jx_versionstream.models import StableVersion, VersionKind
from jx_versionstream.models.quickstart import QuickStarts
from jx_versionstream.models.repo import RepositoryPrefixes

console = Console()


def _entry_to_dict(kind: VersionKind, name: str, record: StableVersion) -> dict[str, Any]:
    data: dict[str, Any] = {"kind": kind.value, "name": name}
    data.update(record.to_dict())
    return data


def _print_data(data: Any, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    else:
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        console.print(text, markup=False, highlight=False, soft_wrap=True)


def output_stable_version(kind: VersionKind, name: str, record: StableVersion, fmt: str) -> None:
    if fmt in ("json", "yaml"):
        _print_data(_entry_to_dict(kind, name, record), fmt)
    else:
        from jx_versionstream.output.tables import stable_version_panel
        console.print(stable_version_panel(kind, name, record))


def output_versions(entries: list[tuple[VersionKind, str, StableVersion]], fmt: str) -> None:
    if fmt in ("json", "yaml"):
        _print_data([_entry_to_dict(k, n, r) for k, n, r in entries], fmt)
    else:
        from jx_versionstream.output.tables import version_list_table
        console.print(version_list_table(entries))


def output_quickstarts(qs: QuickStarts, fmt: str) -> None:
    if fmt in ("json", "yaml"):
        _print_data(qs.to_dict(), fmt)
    else:
        from jx_versionstream.output.tables import quickstarts_table
        console.print(quickstarts_table(qs))


def output_repositories(prefixes: RepositoryPrefixes, fmt: str) -> None:
    if fmt in ("json", "yaml"):
        _print_data(prefixes.to_dict(), fmt)
    else:
        from jx_versionstream.output.tables import repositories_table
        console.print(repositories_table(prefixes))
