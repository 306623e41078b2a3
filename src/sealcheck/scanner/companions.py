"""Companion-file lookups against the in-memory file index."""

from __future__ import annotations

from collections.abc import Iterable

from sealcheck.constants.discovery import CHECKSUM_EXTENSIONS, CHECKSUM_MANIFEST_NAMES, SIGNATURE_EXTENSIONS
from sealcheck.model import FileEntry, FileIndex


def has_companion(entry: FileEntry, extensions: Iterable[str], index: FileIndex) -> bool:
    """Return True if ``<dir>/<name><ext>`` is indexed for any extension."""
    return any(entry.parent / f"{entry.name}{extension}" in index for extension in extensions)


def has_bulk_manifest(entry: FileEntry, index: FileIndex) -> bool:
    """Return True if a checksum manifest sits in the artifact's own directory."""
    return any(entry.parent / manifest_name in index for manifest_name in sorted(CHECKSUM_MANIFEST_NAMES))


def has_checksum_coverage(entry: FileEntry, index: FileIndex) -> bool:
    """Per-file checksum companion or directory-level manifest."""
    return has_companion(entry, CHECKSUM_EXTENSIONS, index) or has_bulk_manifest(entry, index)


def has_signature(entry: FileEntry, index: FileIndex) -> bool:
    """Signatures are always per-file; there is no bulk equivalent."""
    return has_companion(entry, SIGNATURE_EXTENSIONS, index)
