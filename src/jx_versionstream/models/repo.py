"""Chart repository prefix models."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass
class RepositoryURLs:
    prefix: str = ""
    urls: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> RepositoryURLs:
        return cls(
            prefix=str(d.get("prefix") or ""),
            urls=[str(x) for x in d.get("urls") or []],
        )

    def to_dict(self) -> dict:
        return {"prefix": self.prefix, "urls": list(self.urls)}


@dataclass
class RepositoryPrefixes:
    """Maps chart repository prefixes (e.g. ``jenkins-x``) to their URLs.

    The lookup indexes are built once, under a lock, on the first query so
    the object can be shared between threads.
    """

    repositories: list[RepositoryURLs] = field(default_factory=list)
    _url_to_prefix: dict[str, str] | None = field(default=None, init=False, repr=False, compare=False)
    _prefix_to_urls: dict[str, list[str]] | None = field(default=None, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    @classmethod
    def from_dict(cls, d: dict | None) -> RepositoryPrefixes:
        if not d:
            return cls()
        return cls(repositories=[RepositoryURLs.from_dict(r) for r in d.get("repositories") or []])

    def to_dict(self) -> dict:
        return {"repositories": [r.to_dict() for r in self.repositories]}

    def _build_indexes(self) -> None:
        with self._lock:
            if self._url_to_prefix is not None:
                return
            prefix_to_urls: dict[str, list[str]] = {}
            url_to_prefix: dict[str, str] = {}
            for repo in self.repositories:
                prefix_to_urls[repo.prefix] = repo.urls
                for url in repo.urls:
                    url_to_prefix[url] = repo.prefix
            self._prefix_to_urls = prefix_to_urls
            self._url_to_prefix = url_to_prefix

    def prefix_for_url(self, url: str) -> str:
        """Return the repository prefix for the given URL, or an empty string."""
        if self._url_to_prefix is None:
            self._build_indexes()
        return self._url_to_prefix.get(url, "")

    def urls_for_prefix(self, prefix: str) -> list[str]:
        """Return the repository URLs for the given prefix."""
        if self._prefix_to_urls is None:
            self._build_indexes()
        return self._prefix_to_urls.get(prefix, [])
