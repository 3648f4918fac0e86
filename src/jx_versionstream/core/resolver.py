"""Resolve versions of charts, packages, docker images and git repositories."""

from __future__ import annotations

import logging
from pathlib import Path

from jx_versionstream.config.settings import settings
from jx_versionstream.core.catalog import get_quickstarts, get_repository_prefixes
from jx_versionstream.core.exceptions import PackageVerificationError, VersionStreamError
from jx_versionstream.core.verifier import verify_package
from jx_versionstream.core.version_store import load_stable_version, load_stable_version_number
from jx_versionstream.models import StableVersion, VersionKind
from jx_versionstream.models.quickstart import QuickStarts
from jx_versionstream.models.repo import RepositoryPrefixes
from jx_versionstream.utils.git_url import git_url_to_name

logger = logging.getLogger(__name__)

_DOCKER_IO_PREFIX = "docker.io/"


class VersionResolver:
    """Looks up locked versions in a versions directory.

    Nothing is cached: every call reads the current files on disk.
    """

    def __init__(self, versions_dir: str | Path):
        self.versions_dir = Path(versions_dir)

    def resolve_docker_image(self, image: str) -> str:
        """Return ``image:<version>`` using the locked version of the image.

        Images that already have a tag, or have no locked version, are
        returned as they are.
        """
        parts = image.split(":", 1)
        if len(parts) == 2 and parts[1]:
            return image
        info = load_stable_version(self.versions_dir, VersionKind.DOCKER, image)
        if not info.version and image.startswith(_DOCKER_IO_PREFIX):
            image = image[len(_DOCKER_IO_PREFIX):]
            info = load_stable_version(self.versions_dir, VersionKind.DOCKER, image)
        if not info.version:
            logger.warning("could not find a stable version for Docker image: %s in %s", image, self.versions_dir)
            logger.warning("for background see: %s", settings.docs_url)
            logger.info(
                "please lock this version down via the command: %s",
                settings.lock_hint(VersionKind.DOCKER.value, image, with_version=True),
            )
            return image
        prefix = image.strip().removesuffix(":")
        return f"{prefix}:{info.version}"

    def stable_version(self, kind: VersionKind, name: str) -> StableVersion:
        return load_stable_version(self.versions_dir, kind, name)

    def stable_version_number(self, kind: VersionKind, name: str) -> str:
        return load_stable_version_number(self.versions_dir, kind, name)

    def resolve_git_version(self, git_url: str) -> str:
        """Return the locked version (usually a tag or sha) of a git repository."""
        answer = self.stable_version_number(VersionKind.GIT, git_url)
        if not answer:
            path = git_url_to_name(git_url)
            logger.warning("could not find a stable version for git repository: %s in %s", git_url, self.versions_dir)
            logger.warning("for background see: %s", settings.docs_url)
            logger.info(
                "please lock this version down via the command: %s",
                settings.lock_hint(VersionKind.GIT.value, path, with_version=True),
            )
        return answer

    def verify_packages(self, packages: dict[str, str]) -> None:
        """Verify every package, raising one PackageVerificationError listing all failures."""
        errors: list[Exception] = []
        for name in sorted(packages):
            version = packages[name]
            if not version:
                continue
            try:
                self.verify_package(name, version)
            except VersionStreamError as e:
                errors.append(e)
        if errors:
            raise PackageVerificationError(errors)

    def verify_package(self, name: str, current_version: str) -> None:
        data = load_stable_version(self.versions_dir, VersionKind.PACKAGE, name)
        verify_package(data, name, current_version, self.versions_dir)

    def get_repository_prefixes(self) -> RepositoryPrefixes:
        return get_repository_prefixes(self.versions_dir)

    def quickstarts(self) -> QuickStarts:
        """Return the quickstart catalog with missing values filled in, sorted by name."""
        qs = get_quickstarts(self.versions_dir)
        qs.default_missing_values()
        qs.sort()
        return qs
