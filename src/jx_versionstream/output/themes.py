"""Version kind color maps."""

from jx_versionstream.models import VersionKind

KIND_COLORS: dict[VersionKind, str] = {
    VersionKind.CHART: "magenta",
    VersionKind.PACKAGE: "cyan",
    VersionKind.DOCKER: "blue",
    VersionKind.GIT: "green",
}


def styled_kind(kind: VersionKind) -> str:
    color = KIND_COLORS.get(kind, "white")
    return f"[{color}]{kind.value}[/{color}]"


def styled_version(version: str) -> str:
    if not version:
        return "[red]not locked[/red]"
    return f"[bold]{version}[/bold]"
