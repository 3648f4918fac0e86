"""Tests for the version stream models."""

from __future__ import annotations

import threading

import pytest

from jx_versionstream.core.exceptions import InvalidKindError, VersionFileError
from jx_versionstream.models import KIND_STRINGS, StableVersion, VersionKind
from jx_versionstream.models.quickstart import QuickStart, QuickStarts
from jx_versionstream.models.repo import RepositoryPrefixes, RepositoryURLs


@pytest.mark.unit
class TestVersionKind:
    def test_on_disk_names(self):
        assert KIND_STRINGS == ["charts", "packages", "docker", "git"]

    def test_parse(self):
        assert VersionKind.parse("docker") is VersionKind.DOCKER
        assert VersionKind.parse(VersionKind.GIT) is VersionKind.GIT

    def test_parse_unknown(self):
        with pytest.raises(InvalidKindError, match="charts, packages, docker, git"):
            VersionKind.parse("chart")

    def test_invalid_kind_is_a_value_error(self):
        with pytest.raises(ValueError):
            VersionKind.parse("")


@pytest.mark.unit
class TestStableVersion:
    def test_from_dict_treats_null_as_unset(self):
        record = StableVersion.from_dict({"version": "2.0.0", "upperLimit": None})
        assert record.version == "2.0.0"
        assert record.upper_limit == ""

    @pytest.mark.parametrize("value", [1.1, 0, True])
    def test_from_dict_rejects_non_strings(self, value):
        with pytest.raises(VersionFileError, match="field version must be a string"):
            StableVersion.from_dict({"version": value})

    def test_to_dict_omits_empty(self):
        assert StableVersion(version="1.0.0", url="https://x").to_dict() == {"version": "1.0.0", "url": "https://x"}


@pytest.mark.unit
class TestRepositoryPrefixes:
    @pytest.fixture
    def prefixes(self) -> RepositoryPrefixes:
        return RepositoryPrefixes.from_dict({
            "repositories": [
                {"prefix": "jenkins-x", "urls": ["http://chartmuseum.jenkins-x.io", "https://jx.example.com"]},
                {"prefix": "stable", "urls": ["https://kubernetes-charts.storage.googleapis.com"]},
            ]
        })

    def test_prefix_for_url(self, prefixes):
        assert prefixes.prefix_for_url("https://jx.example.com") == "jenkins-x"
        assert prefixes.prefix_for_url("https://unknown") == ""

    def test_urls_for_prefix(self, prefixes):
        assert prefixes.urls_for_prefix("jenkins-x") == ["http://chartmuseum.jenkins-x.io", "https://jx.example.com"]
        assert prefixes.urls_for_prefix("missing") == []

    def test_concurrent_first_lookups(self, prefixes):
        results: list[str] = []

        def lookup() -> None:
            results.append(prefixes.prefix_for_url("http://chartmuseum.jenkins-x.io"))
            results.append(prefixes.urls_for_prefix("stable")[0])

        threads = [threading.Thread(target=lookup) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results.count("jenkins-x") == 8
        assert results.count("https://kubernetes-charts.storage.googleapis.com") == 8

    def test_equality_ignores_indexes(self, prefixes):
        other = RepositoryPrefixes(repositories=list(prefixes.repositories))
        prefixes.prefix_for_url("x")
        assert prefixes == other

    def test_to_dict(self):
        prefixes = RepositoryPrefixes(repositories=[RepositoryURLs(prefix="p", urls=["u"])])
        assert prefixes.to_dict() == {"repositories": [{"prefix": "p", "urls": ["u"]}]}


@pytest.mark.unit
class TestQuickStarts:
    def test_default_missing_values(self):
        qs = QuickStarts(quickstarts=[QuickStart(name="node-http")])
        qs.default_missing_values()
        q = qs.quickstarts[0]
        assert qs.default_owner == "jenkins-x-quickstarts"
        assert q.owner == "jenkins-x-quickstarts"
        assert q.id == "jenkins-x-quickstarts/node-http"
        assert q.download_zip_url == "https://codeload.github.com/jenkins-x-quickstarts/node-http/zip/master"

    def test_uses_catalog_default_owner(self):
        qs = QuickStarts(quickstarts=[QuickStart(name="app")], default_owner="acme")
        qs.default_missing_values()
        assert qs.quickstarts[0].id == "acme/app"

    def test_populated_fields_are_kept(self):
        q = QuickStart(id="x/y", owner="o", name="n", download_zip_url="https://z")
        qs = QuickStarts(quickstarts=[q])
        qs.default_missing_values()
        assert (q.id, q.owner, q.download_zip_url) == ("x/y", "o", "https://z")

    def test_default_missing_values_is_idempotent(self):
        qs = QuickStarts(quickstarts=[QuickStart(name="a"), QuickStart(name="b", owner="o")])
        qs.default_missing_values()
        first = qs.to_dict()
        qs.default_missing_values()
        assert qs.to_dict() == first

    def test_sort_by_name_then_owner(self):
        qs = QuickStarts(quickstarts=[
            QuickStart(name="b", owner="a"),
            QuickStart(name="a", owner="z"),
            QuickStart(name="a", owner="b"),
        ])
        qs.sort()
        assert [(q.name, q.owner) for q in qs.quickstarts] == [("a", "b"), ("a", "z"), ("b", "a")]

    def test_from_dict_round_trip(self):
        data = {
            "quickstarts": [{"id": "o/n", "owner": "o", "name": "n", "tags": ["go"], "downloadZipURL": "https://z"}],
            "defaultOwner": "o",
        }
        assert QuickStarts.from_dict(data).to_dict() == data
