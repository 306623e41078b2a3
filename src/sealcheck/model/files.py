"""Per-scan file index models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class FileKind(StrEnum):
    """Primary dispatch category of a file name."""

    ARTIFACT = "artifact"
    SIGNATURE = "signature"
    CHECKSUM = "checksum"
    MANIFEST = "manifest"
    LOCKFILE = "lockfile"
    NONE = "none"


@dataclass(frozen=True)
class FileEntry:
    """One indexed regular file."""

    path: Path
    name: str
    parent: Path

    @classmethod
    def from_path(cls, path: Path) -> FileEntry:
        return cls(path=path, name=path.name, parent=path.parent)


@dataclass(frozen=True)
class FileIndex:
    """Ordered file entries plus a path set for O(1) companion lookups.

    Both views are built from the same walk and never mutated afterwards.
    ``complete`` is False when the walk was cut short by cancellation.
    """

    root: Path
    entries: tuple[FileEntry, ...] = ()
    paths: frozenset[Path] = field(default_factory=frozenset)
    complete: bool = True

    @classmethod
    def from_entries(cls, root: Path, entries: list[FileEntry], *, complete: bool = True) -> FileIndex:
        return cls(
            root=root,
            entries=tuple(entries),
            paths=frozenset(entry.path for entry in entries),
            complete=complete,
        )

    def __contains__(self, path: object) -> bool:
        return path in self.paths

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
