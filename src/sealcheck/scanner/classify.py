"""Path classification by file name."""

from __future__ import annotations

from sealcheck.constants.discovery import (
    CHECKSUM_EXTENSIONS,
    CHECKSUM_MANIFEST_NAMES,
    LOCKFILE_NAMES,
    RELEASE_ARTIFACT_EXTENSIONS,
    SIGNATURE_EXTENSIONS,
)
from sealcheck.model import FileKind


def has_suffix(name: str, extensions: tuple[str, ...]) -> bool:
    """Return True when *name* ends with any of *extensions*, ignoring case."""
    return name.lower().endswith(extensions)


def is_release_artifact(name: str) -> bool:
    return has_suffix(name, RELEASE_ARTIFACT_EXTENSIONS)


def is_signature(name: str) -> bool:
    return has_suffix(name, SIGNATURE_EXTENSIONS)


def is_checksum_companion(name: str) -> bool:
    return has_suffix(name, CHECKSUM_EXTENSIONS)


def is_checksum_manifest(name: str) -> bool:
    return name in CHECKSUM_MANIFEST_NAMES


def is_lockfile(name: str) -> bool:
    return name in LOCKFILE_NAMES


def classify_file_name(name: str) -> FileKind:
    """Map a base file name to its primary dispatch category.

    Exact conventional names win over suffix matches; among suffixes an
    artifact extension wins over signature and checksum extensions.
    """
    if is_checksum_manifest(name):
        return FileKind.MANIFEST
    if is_lockfile(name):
        return FileKind.LOCKFILE
    if is_release_artifact(name):
        return FileKind.ARTIFACT
    if is_signature(name):
        return FileKind.SIGNATURE
    if is_checksum_companion(name):
        return FileKind.CHECKSUM
    return FileKind.NONE
