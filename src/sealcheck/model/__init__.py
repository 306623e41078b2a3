"""Core data models for Sealcheck."""

from .entities import Evidence, Finding, FindingCandidate, ScanResult, Summary
from .files import FileEntry, FileIndex, FileKind
from .records import DigestMismatch, HashConflict, LockfilePackageEntry, ManifestEntry, ModuleVersionEntry

__all__ = [
    "DigestMismatch",
    "Evidence",
    "FileEntry",
    "FileIndex",
    "FileKind",
    "Finding",
    "FindingCandidate",
    "HashConflict",
    "LockfilePackageEntry",
    "ManifestEntry",
    "ModuleVersionEntry",
    "ScanResult",
    "Summary",
]
