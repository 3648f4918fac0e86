"""Tests for package version verification."""

from __future__ import annotations

import logging

import pytest

from jx_versionstream.core.exceptions import VersionConstraintError, VersionParseError
from jx_versionstream.core.verifier import verify_package
from jx_versionstream.models import StableVersion

EXACT = StableVersion(version="2.12.2")
RANGE = StableVersion(version="1.12.0", upper_limit="1.14.0")
GIT = StableVersion(version="2.1.0", upper_limit="3.0.0")


@pytest.mark.unit
class TestExactVersion:
    def test_matching_version_passes(self):
        verify_package(EXACT, "helm", "2.12.2")

    def test_v_prefix_is_ignored(self):
        verify_package(EXACT, "helm", "v2.12.2")

    @pytest.mark.parametrize("current", ["2.12.3", "2.12.1", "3.0.0"])
    def test_any_other_version_fails(self, current):
        with pytest.raises(VersionConstraintError) as exc_info:
            verify_package(EXACT, "helm", current)
        err = exc_info.value
        assert err.name == "helm"
        assert err.current == current
        assert err.required == "2.12.2"
        assert "requires version 2.12.2" in str(err)


@pytest.mark.unit
class TestVersionRange:
    @pytest.mark.parametrize("current", ["1.12.0", "1.12.1", "1.13.1"])
    def test_in_range_passes(self, current):
        verify_package(RANGE, "kubectl", current)

    def test_too_old(self):
        with pytest.raises(VersionConstraintError, match="is an old version 1.10.1"):
            verify_package(RANGE, "kubectl", "1.10.1")

    @pytest.mark.parametrize("current", ["1.14.0", "2.0.0"])
    def test_too_new(self, current):
        with pytest.raises(VersionConstraintError, match="too new"):
            verify_package(RANGE, "kubectl", current)

    def test_noisy_current_version(self):
        verify_package(GIT, "git", "2.20.1 (Apple Git-117)")

    def test_noisy_current_version_out_of_range(self):
        record = StableVersion(version="2.2.0", upper_limit="3.0.0")
        with pytest.raises(VersionConstraintError):
            verify_package(record, "git", "2.1.1 (Apple Git-117)")


@pytest.mark.unit
class TestPrereleaseVersions:
    RECORD = StableVersion(version="1.0.0", upper_limit="2.0.0")

    @pytest.mark.parametrize("current", ["1.0.0-1", "1.0.0-rc.1", "1.0.0-SNAPSHOT"])
    def test_prerelease_of_lower_bound_is_too_old(self, current):
        with pytest.raises(VersionConstraintError, match="is an old version"):
            verify_package(self.RECORD, "x", current)

    @pytest.mark.parametrize("current", ["2.0.0-1", "2.0.0-rc.1", "1.5.0-beta.2"])
    def test_prerelease_below_upper_limit_is_in_range(self, current):
        verify_package(self.RECORD, "x", current)

    def test_upper_limit_itself_is_too_new(self):
        with pytest.raises(VersionConstraintError, match="too new"):
            verify_package(self.RECORD, "x", "2.0.0")

    def test_prerelease_lock_needs_the_same_label(self):
        with pytest.raises(VersionConstraintError):
            verify_package(StableVersion(version="1.0.0-alpha"), "x", "1.0.0-a")

    def test_build_metadata_does_not_break_exact_match(self):
        verify_package(StableVersion(version="1.0.0-alpha+001"), "x", "1.0.0-alpha")


@pytest.mark.unit
class TestSoftFailures:
    def test_empty_current_version_is_skipped(self):
        verify_package(EXACT, "helm", "  ")

    def test_spaced_prefix_is_still_verified(self):
        verify_package(EXACT, "helm", " v 2.12.2")
        with pytest.raises(VersionConstraintError):
            verify_package(EXACT, "helm", " v 2.12.3")

    def test_missing_lock_only_warns(self, caplog):
        caplog.set_level(logging.INFO)
        verify_package(StableVersion(), "terraform", "0.12.0", "/tmp/versions")
        assert "could not find a stable package version for terraform" in caplog.text
        assert "-k packages -n terraform" in caplog.text


@pytest.mark.unit
class TestParseErrors:
    def test_bad_current_version(self):
        with pytest.raises(VersionParseError) as exc_info:
            verify_package(EXACT, "helm", "latest")
        assert exc_info.value.raw == "latest"
        assert exc_info.value.name == "helm"

    def test_bad_required_version(self):
        with pytest.raises(VersionParseError):
            verify_package(StableVersion(version="2.x"), "helm", "2.12.2")

    def test_bad_upper_limit(self):
        with pytest.raises(VersionParseError, match="upper limit"):
            verify_package(StableVersion(version="1.0.0", upper_limit="two"), "helm", "1.5.0")

    def test_parse_errors_are_not_disabled_by_env(self, monkeypatch):
        monkeypatch.setenv("JX_DISABLE_VERIFY_HELM", "true")
        with pytest.raises(VersionParseError):
            verify_package(EXACT, "helm", "latest")


@pytest.mark.unit
class TestDisableVerify:
    @pytest.mark.parametrize("value", ["true", "TRUE", "True"])
    def test_env_var_suppresses_failure(self, monkeypatch, caplog, value):
        monkeypatch.setenv("JX_DISABLE_VERIFY_HELM", value)
        verify_package(EXACT, "helm", "2.12.3")
        assert "$JX_DISABLE_VERIFY_HELM is true so disabling verify of helm" in caplog.text

    def test_other_values_do_not_suppress(self, monkeypatch):
        monkeypatch.setenv("JX_DISABLE_VERIFY_HELM", "yes")
        with pytest.raises(VersionConstraintError):
            verify_package(EXACT, "helm", "2.12.3")

    def test_only_named_package_is_suppressed(self, monkeypatch):
        monkeypatch.setenv("JX_DISABLE_VERIFY_KUBECTL", "true")
        with pytest.raises(VersionConstraintError):
            verify_package(EXACT, "helm", "2.12.3")
