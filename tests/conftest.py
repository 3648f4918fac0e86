"""Shared fixtures for the version stream tests."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest

from jx_versionstream.config.settings import settings
from jx_versionstream.core.resolver import VersionResolver

TEST_DATA_DIR = Path(__file__).parent / "test_data" / "jenkins-x-versions"


@pytest.fixture(autouse=True)
def clean_verify_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no verification is disabled by the developer's environment."""
    for key in list(os.environ):
        if key.startswith(settings.verify_env_prefix):
            monkeypatch.delenv(key)


@pytest.fixture
def versions_dir() -> Path:
    """The checked-in, read-only versions directory."""
    return TEST_DATA_DIR


@pytest.fixture
def resolver(versions_dir: Path) -> VersionResolver:
    return VersionResolver(versions_dir)


@pytest.fixture
def writable_versions_dir(tmp_path: Path) -> Path:
    """A copy of the test versions directory that tests may modify."""
    target = tmp_path / "jenkins-x-versions"
    shutil.copytree(TEST_DATA_DIR, target)
    return target
