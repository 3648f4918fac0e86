"""Data models for the version stream."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from jx_versionstream.core.exceptions import InvalidKindError, VersionFileError


class VersionKind(enum.Enum):
    CHART = "charts"
    PACKAGE = "packages"
    DOCKER = "docker"
    GIT = "git"

    @classmethod
    def parse(cls, s: str | VersionKind) -> VersionKind:
        """Return the kind for its on-disk name, raising InvalidKindError otherwise."""
        if isinstance(s, VersionKind):
            return s
        for member in cls:
            if member.value == s:
                return member
        raise InvalidKindError(str(s), KIND_STRINGS)


KINDS: list[VersionKind] = list(VersionKind)
KIND_STRINGS: list[str] = [k.value for k in VersionKind]


def _string_field(d: dict, key: str) -> str:
    # unquoted YAML such as 1.10 or 0 loads as a number and would lose digits
    value = d.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise VersionFileError(f"field {key} must be a string but found {type(value).__name__} {value!r}; quote it in YAML")
    return value


@dataclass
class StableVersion:
    """The locked version information for a single chart, package, image or repository.

    A record with no fields set means no version has been locked.

    ``upper_limit`` marks the first version that is too new: with
    ``version="1.10.1"`` and ``upper_limit="1.14.0"`` the versions ``1.11.5``
    and ``1.13.1234`` are valid while ``1.14.0`` and ``1.14.1`` are not. When
    there is no upper limit the version must match exactly.
    """

    version: str = ""
    upper_limit: str = ""
    git_url: str = ""
    component: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, d: dict | None) -> StableVersion:
        if not d:
            return cls()
        return cls(
            version=_string_field(d, "version"),
            upper_limit=_string_field(d, "upperLimit"),
            git_url=_string_field(d, "gitUrl"),
            component=_string_field(d, "component"),
            url=_string_field(d, "url"),
        )

    def to_dict(self) -> dict[str, Any]:
        data = {
            "version": self.version,
            "upperLimit": self.upper_limit,
            "gitUrl": self.git_url,
            "component": self.component,
            "url": self.url,
        }
        return {k: v for k, v in data.items() if v}

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()
