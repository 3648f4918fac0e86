"""Errors raised by the version stream."""

from __future__ import annotations

from pathlib import Path


class VersionStreamError(Exception):
    """Base exception for all version stream errors."""


class VersionFileError(VersionStreamError):
    """A version stream file could not be read, decoded or written."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = Path(path) if path else None


class VersionParseError(VersionStreamError):
    """A version string is not a valid semantic version."""

    def __init__(self, message: str, name: str, raw: str):
        super().__init__(message)
        self.name = name
        self.raw = raw


class VersionConstraintError(VersionStreamError):
    """A package version does not satisfy its locked version."""

    def __init__(self, message: str, name: str, current: str, required: str):
        super().__init__(message)
        self.name = name
        self.current = current
        self.required = required


class PackageVerificationError(VersionStreamError):
    """One or more packages failed verification."""

    def __init__(self, errors: list[Exception]):
        super().__init__("\n".join(str(e) for e in errors))
        self.errors = errors


class InvalidKindError(VersionStreamError, ValueError):
    """Unknown version kind."""

    def __init__(self, kind: str, valid: list[str]):
        super().__init__(f"invalid kind '{kind}'. Possible values: {', '.join(valid)}")
        self.kind = kind
        self.valid = valid
