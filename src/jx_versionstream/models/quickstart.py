"""Quickstart catalog models."""

from __future__ import annotations

from dataclasses import dataclass, field

from jx_versionstream.config.settings import settings


@dataclass
class QuickStart:
    id: str = ""
    owner: str = ""
    name: str = ""
    version: str = ""
    language: str = ""
    framework: str = ""
    tags: list[str] = field(default_factory=list)
    download_zip_url: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> QuickStart:
        return cls(
            id=str(d.get("id") or ""),
            owner=str(d.get("owner") or ""),
            name=str(d.get("name") or ""),
            version=str(d.get("version") or ""),
            language=str(d.get("language") or ""),
            framework=str(d.get("framework") or ""),
            tags=[str(x) for x in d.get("tags") or []],
            download_zip_url=str(d.get("downloadZipURL") or ""),
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "owner": self.owner,
            "name": self.name,
            "version": self.version,
            "language": self.language,
            "framework": self.framework,
            "tags": list(self.tags),
            "downloadZipURL": self.download_zip_url,
        }
        return {k: v for k, v in data.items() if v}

    def default_missing_values(self, default_owner: str) -> None:
        if not self.owner:
            self.owner = default_owner
        if not self.id:
            self.id = f"{self.owner}/{self.name}"
        if not self.download_zip_url:
            self.download_zip_url = f"https://codeload.github.com/{self.owner}/{self.name}/zip/master"


@dataclass
class QuickStarts:
    quickstarts: list[QuickStart] = field(default_factory=list)
    default_owner: str = ""

    @classmethod
    def from_dict(cls, d: dict | None) -> QuickStarts:
        if not d:
            return cls()
        return cls(
            quickstarts=[QuickStart.from_dict(q) for q in d.get("quickstarts") or []],
            default_owner=str(d.get("defaultOwner") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "quickstarts": [q.to_dict() for q in self.quickstarts],
            "defaultOwner": self.default_owner,
        }

    def default_missing_values(self) -> None:
        """Fill in the owner, ID and download URL of any quickstart missing them."""
        if not self.default_owner:
            self.default_owner = settings.default_quickstart_owner
        for q in self.quickstarts:
            q.default_missing_values(self.default_owner)

    def sort(self) -> None:
        """Sort the quickstarts by name, then owner."""
        self.quickstarts.sort(key=lambda q: (q.name, q.owner))
