"""Verify installed package versions against their stable version records."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from jx_versionstream.config.settings import settings
from jx_versionstream.core.exceptions import VersionConstraintError, VersionParseError
from jx_versionstream.models import StableVersion, VersionKind
from jx_versionstream.utils.version_compare import convert_to_version, parse_semver

logger = logging.getLogger(__name__)


def verify_package(
    record: StableVersion,
    name: str,
    current_version: str,
    work_dir: str | Path = "",
) -> None:
    """Check that ``current_version`` of package ``name`` satisfies ``record``.

    Without an upper limit the current version must equal the locked version.
    With one, it must be at least the locked version and below the limit.
    An unknown current version or a missing lock only log; violations raise
    VersionConstraintError unless disabled via ``JX_DISABLE_VERIFY_<NAME>``.
    """
    current = convert_to_version(current_version)
    if not current:
        return
    version = convert_to_version(record.version)
    if not version:
        logger.warning(
            "could not find a stable package version for %s from %s\nFor background see: %s",
            name, work_dir, settings.docs_url,
        )
        logger.info(
            "Please lock this version down via the command: %s",
            settings.lock_hint(VersionKind.PACKAGE.value, name),
        )
        return

    current_sem = _parse(current, name, "current version")
    min_sem = _parse(version, name, "required version")

    upper_limit = convert_to_version(record.upper_limit)
    if not upper_limit:
        if current_sem == min_sem:
            return
        _verify_error(VersionConstraintError(
            f"package {name} is on version {current} but the version stream requires version {version}",
            name, current, version,
        ))
        return

    if current_sem < min_sem:
        _verify_error(VersionConstraintError(
            f"package {name} is an old version {current}. The version stream requires at least {version}",
            name, current, version,
        ))
        return

    limit_sem = _parse(upper_limit, name, "upper limit version")
    if current_sem >= limit_sem:
        _verify_error(VersionConstraintError(
            f"package {name} is using version {current} which is too new. "
            f"The version stream requires a version earlier than {upper_limit}",
            name, current, f"<{upper_limit}",
        ))


def _parse(text: str, name: str, what: str):
    try:
        return parse_semver(text)
    except ValueError as e:
        raise VersionParseError(
            f"failed to parse semantic version for {what} {text} for package {name}: {e}",
            name, text,
        ) from e


def _verify_error(err: VersionConstraintError) -> None:
    # package names are not sanitized, so e.g. foo/bar gives JX_DISABLE_VERIFY_FOO/BAR
    env_var = settings.verify_env_prefix + err.name.upper()
    value = os.environ.get(env_var, "")
    if value.lower() == "true":
        logger.warning("$%s is true so disabling verify of %s: %s", env_var, err.name, err)
        return
    raise err
