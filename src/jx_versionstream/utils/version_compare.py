"""Semver parsing and normalization utilities."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from packaging.version import Version

_SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


def _normalize_once(text: str) -> str:
    answer = text.strip()
    # a doubled prefix is not a version prefix; leave it for the parser to reject
    if answer.startswith("v") and not answer.startswith("vv"):
        answer = answer[1:]
    words = answer.split()
    return words[0] if words else ""


def convert_to_version(text: str) -> str:
    """Strip whitespace and a leading 'v', keeping only the first word.

    Tools such as git report versions like ``2.20.1 (Apple Git-117)``, so
    anything after the first whitespace is dropped. Applying this twice gives
    the same result as applying it once.
    """
    answer = _normalize_once(text or "")
    # "v v1.0.0" leaves a second prefix behind after the first pass
    while True:
        again = _normalize_once(answer)
        if again == answer:
            return answer
        answer = again


def _identifier_key(identifier: str) -> tuple:
    # numeric identifiers sort numerically and below alphanumeric ones
    if identifier.isdigit():
        return (0, int(identifier), "")
    return (1, 0, identifier)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class SemVer:
    """A parsed semantic version ordered by semver precedence.

    Build metadata is kept for display but takes no part in comparisons.
    """

    release: Version
    prerelease: tuple[str, ...] = ()
    build: str = ""

    def _key(self) -> tuple:
        # a release sorts above all of its pre-releases
        if not self.prerelease:
            return (self.release, 1, ())
        return (self.release, 0, tuple(_identifier_key(i) for i in self.prerelease))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: SemVer) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        text = str(self.release)
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + self.build
        return text


def parse_semver(text: str) -> SemVer:
    """Parse a strict MAJOR.MINOR.PATCH[-pre][+build] version.

    Raises ValueError if the text is not a semantic version.
    """
    m = _SEMVER_RE.match(text)
    if not m:
        raise ValueError(f"'{text}' is not a semantic version")
    prerelease = tuple(m.group(4).split(".")) if m.group(4) else ()
    for identifier in prerelease:
        if identifier.isdigit() and len(identifier) > 1 and identifier.startswith("0"):
            raise ValueError(f"pre-release identifier '{identifier}' in version '{text}' has a leading zero")
    release = Version(".".join(m.group(i) for i in (1, 2, 3)))
    return SemVer(release, prerelease, m.group(5) or "")
