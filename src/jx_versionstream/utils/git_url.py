"""Git URL helpers."""

from __future__ import annotations


def git_url_to_name(url: str) -> str:
    """Return the version stream name of a git URL.

    Trims any URL scheme and a trailing ``.git`` or ``/`` so that
    ``https://github.com/org/repo.git`` and ``github.com/org/repo/`` map to
    the same ``github.com/org/repo`` record.
    """
    idx = url.find("://")
    if idx > 0:
        url = url[idx + 3:]
    url = url.removesuffix(".git")
    url = url.removesuffix("/")
    return url
