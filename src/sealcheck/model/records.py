"""Parsed records extracted from checksum manifests and lockfiles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ManifestEntry:
    """A ``(hash, file name)`` pair declared on one checksum manifest line.

    ``declared_hash`` is always lowercase; ``file_name`` has any leading
    binary-mode ``*`` marker already removed.
    """

    declared_hash: str
    file_name: str
    line: int


@dataclass(frozen=True)
class LockfilePackageEntry:
    """One ``packages`` entry of an npm ``package-lock.json``."""

    package_path: str
    version: str = ""
    resolved: str = ""
    integrity: str = ""

    @property
    def missing_integrity(self) -> bool:
        """Whether the entry was fetched from somewhere but records no hash."""
        return bool(self.resolved) and not self.integrity


@dataclass(frozen=True)
class ModuleVersionEntry:
    """One ``module version hash`` line of a ``go.sum`` file."""

    module: str
    version: str
    hash: str
    line: int

    @property
    def key(self) -> tuple[str, str]:
        return (self.module, self.version)


@dataclass(frozen=True)
class DigestMismatch:
    """A manifest line whose declared digest differs from the file content."""

    entry: ManifestEntry
    actual_hash: str

    @property
    def declared_hash(self) -> str:
        return self.entry.declared_hash


@dataclass(frozen=True)
class HashConflict:
    """A repeated module/version whose hash differs from the previous occurrence."""

    entry: ModuleVersionEntry
    previous_hash: str
