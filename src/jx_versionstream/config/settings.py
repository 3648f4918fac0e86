"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_jx_home() -> Path:
    jx_home = os.environ.get("JX_HOME", "")
    if jx_home:
        return Path(jx_home)
    return Path.home() / ".jx"


def _default_versions_dir() -> Path:
    """Return the default location of the cloned versions repository.

    Checks JX_VERSIONS_DIR first, then falls back to the
    jenkins-x-versions clone inside the jx config home.
    """
    versions_dir = os.environ.get("JX_VERSIONS_DIR", "")
    if versions_dir:
        return Path(versions_dir)
    return _default_jx_home() / "jenkins-x-versions"


@dataclass
class Settings:
    versions_dir: Path = field(default_factory=_default_versions_dir)
    file_extension: str = ".yml"
    repositories_file: str = "charts/repositories.yml"
    quickstarts_file: str = "quickstarts.yml"
    write_permissions: int = 0o760
    verify_env_prefix: str = "JX_DISABLE_VERIFY_"
    default_quickstart_owner: str = "jenkins-x-quickstarts"
    docs_url: str = "https://jenkins-x.io/docs/concepts/version-stream/"
    lock_command: str = "jx step create pr versions"
    default_output: str = "table"

    def lock_hint(self, kind: str, name: str, with_version: bool = False) -> str:
        """Return the command a user can run to lock down a missing version."""
        hint = f"{self.lock_command} -k {kind} -n {name}"
        if with_version:
            hint += " -v 1.2.3"
        return hint


# Global singleton
settings = Settings()
